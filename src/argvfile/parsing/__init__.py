from .reader import OptionFileReader
from .source import OptionFileSource
from .tokenizer import OptionLineTokenizer

__all__ = ["OptionFileReader", "OptionFileSource", "OptionLineTokenizer"]
