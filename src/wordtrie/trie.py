import logging

from pyrsistent import pvector

log = logging.getLogger("wordtrie")


class TrieError(Exception):
    pass

TError = TrieError


def check_text(text):
    if not isinstance(text, str):
        raise TrieError(f'Trie text must be a str, not {type(text).__name__}.')
    return text


class Trie:
    """Implements a Trie (prefix tree) of strings.
    https://en.wikipedia.org/wiki/Trie

    Every edge is labelled by one character and every node is at once a tree
    node, the root of its own subtree and a handle that can be searched,
    mutated and iterated. A node is 'terminal' when the path leading to it is
    a stored word; only terminal nodes carry a value.

    `length` is the number of words in the subtree rooted at the node
    (including the node itself). Nodes whose length drops to zero are pruned.

    The truth value of a trie follows its length, so an empty trie is `False`.
    """

    __slots__ = ('key', 'children', 'terminal', 'value', '_length', '_parent')

    def __init__(self, key=''):
        self.key = key
        self.children = {}
        self.terminal = False
        self.value = None
        self._length = 0
        self._parent = None

    # Core API.

    def get_prefix(self, text, exact=True):
        """Returns the node reached by walking `text` from this node.

        With `exact` the node must be a stored word, otherwise any node on the
        path of some word is accepted. Returns `None` when there is no match.
        """
        node = self
        for char in check_text(text):
            node = node.children.get(char)
            if node is None:
                return None
        if exact and not node.terminal:
            return None
        return node

    def has_prefix(self, text, exact=True):
        return self.get_prefix(text, exact) is not None

    def add_prefix(self, text):
        if self.has_prefix(text, exact=True):
            return
        # Ancestors above the call site see the new word too.
        ancestor = self.get_parent()
        while ancestor is not None:
            ancestor._length += 1
            ancestor = ancestor.get_parent()
        node = self
        for char in text:
            node._length += 1
            child = node.children.get(char)
            if child is None:
                child = Trie(char)
                child._parent = node
                node.children[char] = child
            node = child
        node._length += 1
        node.terminal = True

    def remove_prefix(self, text):
        node = self.get_prefix(text, exact=True)
        if node is None:
            return
        node.terminal = False
        node.value = None
        while node is not None:
            node._length -= 1
            parent = node.get_parent()
            if not node._length and parent is not None:
                log.debug('Pruning branch %r', str(node))
                node._parent = None
                del parent.children[node.key]
            node = parent

    def set_value(self, text, value):
        node = self.get_prefix(text, exact=True)
        if node is not None:
            node.value = value

    def get_value(self, text):
        node = self.get_prefix(text, exact=True)
        if node is None:
            return None
        return node.value

    def get_parent(self):
        return self._parent

    @property
    def length(self):
        return self._length

    # Traversal.

    def iterate(self):
        """Yields `(word, value)` for every word below this node.

        Words are spelled relative to this node and come out in ascending
        code point order. This differs from UTF-16 code unit order only for
        characters above U+FFFF, which sort after U+E000-U+FFFF here. Each
        call starts a new traversal; mutating the trie while a traversal is
        suspended gives undefined results.
        """
        stack = [(self, pvector())]
        while stack:
            node, path = stack.pop()
            if node.terminal:
                yield (''.join(path), node.value)
            # Pushed in reverse so the smallest key is popped first.
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], path.append(char)))

    def to_array(self):
        return [word for word, _ in self.iterate()]

    def to_map(self):
        return dict(self.iterate())

    def clone(self):
        return Trie.from_map(self.to_map())

    def validate(self):
        """Checks the structural invariants of the subtree and returns its length.

        Raises `TrieError` if a count, key or parent link is inconsistent.
        """
        count = 1 if self.terminal else 0
        for char, child in self.children.items():
            if child.key != char:
                raise TrieError(f'Child {child.key!r} is stored under key {char!r}.')
            if child.get_parent() is not self:
                raise TrieError(f'Child {str(child)!r} does not point back to its parent.')
            if not child._length:
                raise TrieError(f'Empty branch {str(child)!r} was not pruned.')
            count += child.validate()
        if count != self._length:
            raise TrieError(
                f'Node {str(self)!r} has length {self._length} but holds {count} words.')
        return count

    # Constructors.

    @staticmethod
    def create():
        return Trie()

    @staticmethod
    def from_array(words):
        trie = Trie()
        for word in words:
            trie.add_prefix(word)
        log.debug('Built trie with %d words from array', len(trie))
        return trie

    @staticmethod
    def from_map(entries):
        trie = Trie()
        for word in entries:
            trie.add_prefix(word)
        for word, value in entries.items():
            trie.set_value(word, value)
        log.debug('Built trie with %d words from map', len(trie))
        return trie

    # Python protocols.

    def __len__(self):
        return self._length

    def __contains__(self, text):
        return self.has_prefix(text, exact=True)

    def __iter__(self):
        return self.iterate()

    def __str__(self):
        keys = []
        node = self
        while node is not None:
            keys.append(node.key)
            node = node.get_parent()
        return ''.join(reversed(keys))

    def __repr__(self):
        return 'Trie(%r, length=%d)' % (str(self), self._length)


create = Trie.create
from_array = Trie.from_array
from_map = Trie.from_map
