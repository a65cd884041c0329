"""Протокольный слой: транспорт, конверты и диспетчер запросов."""
