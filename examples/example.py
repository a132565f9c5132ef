import logging

from wordtrie import Trie

logging.basicConfig(level=logging.DEBUG)

# build a trie from words, with and without values:

trie = Trie.from_map({'bot': 1, 'bottle': 2})
trie.add_prefix('bottom')
trie.set_value('bottom', 3)
print(list(trie))

# prefix search:

print(trie.has_prefix('bott', exact=False))
print(trie.has_prefix('bott'))
subtrie = trie.get_prefix('bott', exact=False)
print(str(subtrie), subtrie.length, subtrie.to_array())

# removal prunes branches nobody uses anymore:

trie.remove_prefix('bottle')
print(trie.get_prefix('bottl', exact=False))
print(trie.to_map())

# clones are independent:

clone = trie.clone()
clone.add_prefix('box')
print(trie.to_array(), clone.to_array())
