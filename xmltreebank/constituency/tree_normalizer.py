"""
Normalizers applied to the pieces of a tree as it is read

A normalizer has three entry points:
  normalize_terminal(word) -> the text used for a leaf
  normalize_nonterminal(label) -> the label used for an internal node or preterminal
  normalize_whole_tree(tree, tree_factory) -> a finished tree

Any object with those three methods can be given to the XML reader.

When SpanishTreeNormalizer splits a multiword token, every word gets the
tag of the whole token, so Ley_de_Bases becomes (np00000 Ley) (np00000 de)
(np00000 Bases).  No attempt is made to infer the tags of the pieces.
Retagging the split words is left to a tagger.
"""

import logging

from xmltreebank.constituency.spanish_tags import simplify_tag

logger = logging.getLogger('xmltreebank.constituency')

ROOT_LABEL = "ROOT"

EMPTY_LEAF = "-NONE-"

MULTIWORD_SEPARATOR = "_"

class TreeNormalizer:
    """
    Leaves everything exactly as it was read
    """
    def normalize_terminal(self, leaf):
        return leaf

    def normalize_nonterminal(self, category):
        return category

    def normalize_whole_tree(self, tree, tree_factory):
        return tree

def copy_annotations(source, dest):
    """
    Copy the word, lemma, and tag of one node to another

    Either node can be a tree without annotations, in which case nothing happens
    """
    if source.word is not None:
        dest.set_word(source.word)
    if source.lemma is not None:
        dest.set_lemma(source.lemma)
    if source.tag is not None:
        dest.set_tag(source.tag)

def split_multiword(text):
    """
    Split a token such as Ley_de_Bases into its words

    Returns a list with just the text if there is nothing to split
    """
    pieces = [x for x in text.split(MULTIWORD_SEPARATOR) if x]
    if len(pieces) <= 1:
        return [text]
    return pieces

def is_elliptic_preterminal(tree):
    """
    Elliptic preterminals are labeled with their constituent, not a tag

    Word preterminals from the reader always have a tag, even when the
    word itself is blank.  A tree which cannot hold a tag falls back to
    looking for the empty leaf, which cannot tell a blank word apart
    from an elided constituent.
    """
    return tree.tag is None and tree.children[0].label == EMPTY_LEAF

class SpanishTreeNormalizer(TreeNormalizer):
    """
    Normalization for the Spanish XML treebanks

    simplified_tagset: reduce the preterminal tags to the simplified EAGLES tagset
    aggressive_normalization: split multiword tokens into one preterminal per word

    Finished trees are always put under a ROOT node
    """
    def __init__(self, simplified_tagset=False, aggressive_normalization=False):
        self.simplified_tagset = simplified_tagset
        self.aggressive_normalization = aggressive_normalization

    def normalize_terminal(self, leaf):
        return leaf.strip()

    def normalize_nonterminal(self, category):
        return category.strip()

    def normalize_whole_tree(self, tree, tree_factory):
        children = self.normalize_subtree(tree, tree_factory)
        if len(children) == 1 and children[0].label == ROOT_LABEL:
            return children[0]
        return tree_factory.new_tree_node(ROOT_LABEL, children)

    def normalize_subtree(self, tree, tree_factory):
        """
        Returns a list of trees, as splitting a multiword can turn one preterminal into several
        """
        if tree.is_leaf():
            leaf = tree_factory.new_leaf(tree.label)
            copy_annotations(tree, leaf)
            return [leaf]

        if tree.is_preterminal():
            return self.normalize_preterminal(tree, tree_factory)

        children = []
        for child in tree.children:
            children.extend(self.normalize_subtree(child, tree_factory))
        new_tree = tree_factory.new_tree_node(tree.label, children)
        copy_annotations(tree, new_tree)
        return [new_tree]

    def normalize_preterminal(self, tree, tree_factory):
        leaf = tree.children[0]
        tag = tree.label
        if self.simplified_tagset and not is_elliptic_preterminal(tree):
            tag = simplify_tag(tag)

        words = [leaf.label]
        if self.aggressive_normalization:
            words = split_multiword(leaf.label)
        if len(words) > 1:
            logger.debug("Splitting multiword %s into %d words", leaf.label, len(words))
            lemmas = split_multiword(leaf.lemma) if leaf.lemma is not None else []
            if len(lemmas) != len(words):
                lemmas = [None] * len(words)
        else:
            lemmas = [leaf.lemma]

        preterminals = []
        for word, lemma in zip(words, lemmas):
            new_leaf = tree_factory.new_leaf(word)
            new_leaf.set_word(word)
            if lemma is not None:
                new_leaf.set_lemma(lemma)
            new_preterminal = tree_factory.new_tree_node(tag, [new_leaf])
            if tree.tag is not None:
                new_preterminal.set_tag(tag)
            preterminals.append(new_preterminal)
        return preterminals
