from .trie import Trie
from .trie import TrieError
from .trie import create
from .trie import from_array
from .trie import from_map
