import pytest

from xmltreebank.constituency.parse_tree import LabeledTree, Tree
from xmltreebank.constituency.tree_factory import LabeledTreeFactory, TreeFactory
from xmltreebank.constituency.tree_normalizer import SpanishTreeNormalizer, TreeNormalizer, is_elliptic_preterminal, split_multiword

pytestmark = [pytest.mark.travis]

def build_preterminal(factory, tag, word, lemma=None):
    leaf = factory.new_leaf(word)
    leaf.set_word(word)
    if lemma is not None:
        leaf.set_lemma(lemma)
    preterminal = factory.new_tree_node(tag, [leaf])
    preterminal.set_tag(tag)
    return preterminal

def build_sentence(factory):
    return factory.new_tree_node("sentence",
                                 [factory.new_tree_node("sn", [build_preterminal(factory, "ncfs000", "casa", "casa")]),
                                  factory.new_tree_node("grup.verb", [build_preterminal(factory, "vmip3s0", "llueve", "llover")]),
                                  factory.new_tree_node("sn", [factory.new_leaf("-NONE-")])])

def test_identity():
    factory = LabeledTreeFactory()
    tree = build_sentence(factory)
    normalizer = TreeNormalizer()
    assert normalizer.normalize_terminal(" casa ") == " casa "
    assert normalizer.normalize_nonterminal(" sn ") == " sn "
    assert normalizer.normalize_whole_tree(tree, factory) is tree

def test_strip():
    normalizer = SpanishTreeNormalizer()
    assert normalizer.normalize_terminal(" casa ") == "casa"
    assert normalizer.normalize_nonterminal(" sn\n") == "sn"

def test_add_root():
    factory = LabeledTreeFactory()
    normalizer = SpanishTreeNormalizer()
    tree = normalizer.normalize_whole_tree(build_sentence(factory), factory)
    assert "{}".format(tree) == "(ROOT (sentence (sn (ncfs000 casa)) (grup.verb (vmip3s0 llueve)) (sn -NONE-)))"

    # already has a ROOT, so it should not get another one
    again = normalizer.normalize_whole_tree(tree, factory)
    assert again == tree
    assert again.label == "ROOT"
    assert again.children[0].label == "sentence"

def test_annotations_kept():
    factory = LabeledTreeFactory()
    normalizer = SpanishTreeNormalizer()
    tree = normalizer.normalize_whole_tree(build_sentence(factory), factory)
    preterminals = list(tree.yield_preterminals())
    assert [x.tag for x in preterminals] == ["ncfs000", "vmip3s0", None]
    assert [x.children[0].lemma for x in preterminals] == ["casa", "llover", None]
    assert [x.children[0].word for x in preterminals] == ["casa", "llueve", "-NONE-"]

def test_simplified():
    factory = LabeledTreeFactory()
    normalizer = SpanishTreeNormalizer(simplified_tagset=True)
    tree = normalizer.normalize_whole_tree(build_sentence(factory), factory)
    # the elliptic sn is not a tag, so it is not simplified
    assert "{}".format(tree) == "(ROOT (sentence (sn (nc0s000 casa)) (grup.verb (vmip000 llueve)) (sn -NONE-)))"
    assert [x.tag for x in tree.yield_preterminals()] == ["nc0s000", "vmip000", None]

def test_split_multiword():
    assert split_multiword("Ley_de_Bases") == ["Ley", "de", "Bases"]
    assert split_multiword("casa") == ["casa"]
    assert split_multiword("_") == ["_"]
    assert split_multiword("a__b") == ["a", "b"]

def test_aggressive():
    factory = LabeledTreeFactory()
    tree = factory.new_tree_node("sentence", [build_preterminal(factory, "np00000", "Ley_de_Bases", "ley_de_bases"),
                                              build_preterminal(factory, "np00000", "Banco_Central", "banco"),
                                              build_preterminal(factory, "fc", "_")])
    normalizer = SpanishTreeNormalizer(aggressive_normalization=True)
    tree = normalizer.normalize_whole_tree(tree, factory)
    assert "{}".format(tree) == "(ROOT (sentence (np00000 Ley) (np00000 de) (np00000 Bases) (np00000 Banco) (np00000 Central) (fc _)))"
    # lemmas which don't split the same way as the words are dropped
    lemmas = [x.children[0].lemma for x in tree.yield_preterminals()]
    assert lemmas == ["ley", "de", "bases", None, None, None]

def test_plain_trees():
    """
    The normalizer works on trees which have no annotations at all
    """
    factory = TreeFactory()
    tree = build_sentence(factory)
    normalizer = SpanishTreeNormalizer(simplified_tagset=True, aggressive_normalization=True)
    tree = normalizer.normalize_whole_tree(tree, factory)
    assert type(tree) is Tree
    assert "{}".format(tree) == "(ROOT (sentence (sn (nc0s000 casa)) (grup.verb (vmip000 llueve)) (sn -NONE-)))"

def test_simplified_blank_word():
    """
    A tagged preterminal over the empty leaf is a word, not an elided constituent
    """
    factory = LabeledTreeFactory()
    tree = factory.new_tree_node("sentence", [build_preterminal(factory, "ncfs000", "-NONE-"),
                                              factory.new_tree_node("sn", [factory.new_leaf("-NONE-")])])
    assert not is_elliptic_preterminal(tree.children[0])
    assert is_elliptic_preterminal(tree.children[1])

    normalizer = SpanishTreeNormalizer(simplified_tagset=True, aggressive_normalization=True)
    tree = normalizer.normalize_whole_tree(tree, factory)
    assert "{}".format(tree) == "(ROOT (sentence (nc0s000 -NONE-) (sn -NONE-)))"
    assert [x.tag for x in tree.yield_preterminals()] == ["nc0s000", None]
