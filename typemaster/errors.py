class TypemasterError(Exception):
    """Base class for errors that should stop the program."""


class WordListError(TypemasterError):
    """The word source is empty or could not be read."""


class ConfigError(TypemasterError):
    """An explicitly requested config file is missing."""
