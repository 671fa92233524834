from .config_manager import Config
from .corpus_loader import CorpusLoadError, index_file, index_lines
from .logger_utils import setup_logging, time_block

__all__ = [
    "Config",
    "CorpusLoadError",
    "index_file",
    "index_lines",
    "setup_logging",
    "time_block",
]
