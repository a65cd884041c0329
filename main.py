import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent


def parse_args(argv=None):
    parser = ArgumentParser(description="Проверка подключения к AnkiConnect")
    parser.add_argument("--host", help="Хост AnkiConnect (по умолчанию ANKI_HOST)")
    parser.add_argument("--port", type=int, help="Порт AnkiConnect (по умолчанию ANKI_PORT)")
    parser.add_argument(
        "--api-version",
        type=int,
        dest="api_version",
        help="Версия протокола (по умолчанию ANKI_API_VERSION)",
    )
    parser.add_argument(
        "--no-run",
        action="store_true",
        help="Проверить загрузку конфигурации без обращения к Anki",
    )
    return parser.parse_args(argv)


def run(host=None, port=None, version=None):
    import anki_interface

    try:
        connection = anki_interface.connect(host=host, port=port, version=version)
    except anki_interface.ConnectError as exc:
        print(f"[error] {exc}")
        return 1

    try:
        server_version = anki_interface.call(connection, "version")
        decks = anki_interface.get_deck_names(connection=connection)
    except anki_interface.AnkiError as exc:
        print(f"[error] {exc}")
        return 1
    print(f"[ok] {connection.url}: AnkiConnect v{server_version}")
    for name in sorted(decks):
        print(f"  - {name}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    load_dotenv(ROOT / ".env")

    from anki_interface import config

    config.reload_from_env()

    if args.no_run:
        return 0

    return run(host=args.host, port=args.port, version=args.api_version)


if __name__ == "__main__":
    sys.exit(main())
