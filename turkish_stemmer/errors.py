class TurkishStemmerError(Exception):
    """Base class for errors raised by turkish_stemmer."""


class ConfigurationError(TurkishStemmerError, ValueError):
    """
    Errors raised while loading or walking the suffix and state tables:
    unreadable data files, transitions to unknown states or suffixes.
    """
