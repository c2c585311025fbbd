"""
Reads constituency trees from the XML format used by the Spanish treebanks

The documents look like this:

<article>
  <sentence>
    <sn func="suj">
      <grup.nom>
        <n lem="casa" pos="ncfs000" wd="casa"/>
      </grup.nom>
    </sn>
    <sn elliptic="yes" func="suj"/>
    ...
  </sentence>
</article>

Each <sentence> becomes one tree.  Elements with a wd attribute are
words, elements with an elliptic attribute are empty categories, and
everything else is a constituent built from its children.  Constituents
which end up with no children are discarded, as are sentences which
end up with no tree at all.
"""

import io
import logging
import os
import xml.etree.ElementTree as ET

from xmltreebank.constituency.parse_tree import SENTENCE_ID
from xmltreebank.constituency.spanish_tags import guess_pos
from xmltreebank.constituency.tree_factory import LabeledTreeFactory
from xmltreebank.constituency.tree_normalizer import SpanishTreeNormalizer, EMPTY_LEAF
from xmltreebank.utils.get_tqdm import get_tqdm

tqdm = get_tqdm()

logger = logging.getLogger('xmltreebank.constituency')

NODE_SENT = "sentence"

ATTR_WORD = "wd"
ATTR_LEMMA = "lem"
ATTR_POS = "pos"
ATTR_ELLIPTIC = "elliptic"

class ParseFailure(ValueError):
    """
    The document could not be read, either because it is not well formed XML or because reading it failed
    """
    def __init__(self, error):
        super().__init__("Could not read XML treebank: {}".format(error))
        self.error = error

def is_word_node(node):
    return ATTR_WORD in node.attrib

def is_elliptic_node(node):
    return ATTR_ELLIPTIC in node.attrib

def get_word(node):
    """
    The surface form of a word node, or the empty leaf if the word is blank
    """
    word = node.get(ATTR_WORD, "").strip()
    if not word:
        return EMPTY_LEAF
    return word

def get_pos(node, word, simplified_tagset=False):
    """
    Determine the part of speech of the given word node

    Uses some heuristics to make up for missing part-of-speech labels
    """
    pos = node.get(ATTR_POS, "")
    if not pos:
        pos = guess_pos(node.tag, node.attrib, word, simplified_tagset)
    return pos

def load_sentences(stream, encoding=None):
    """
    Parse the stream and return the <sentence> elements in document order

    A binary stream is decoded according to the XML declaration
    unless an encoding is given to override it
    """
    try:
        parser = ET.XMLParser(encoding=encoding)
        document = ET.parse(stream, parser=parser)
    except (ET.ParseError, OSError, UnicodeError) as e:
        raise ParseFailure(e) from e
    return list(document.iter(NODE_SENT))

class XMLTreeReader:
    """
    Reads one tree at a time from an XML treebank document

    The whole document is parsed when the reader is created.  If that
    fails, the error is logged once and kept in parse_error, and the
    reader acts as if the document had no sentences.

    stream: a text or binary file object
    encoding: overrides the declared encoding of a binary stream
    simplified_tagset: use the simplified EAGLES tagset
    aggressive_normalization: split multiword tokens into separate words
    tree_normalizer, tree_factory: replace the default Spanish normalizer
      and the LabeledTree factory
    """
    def __init__(self, stream, encoding=None, simplified_tagset=False, aggressive_normalization=False,
                 tree_normalizer=None, tree_factory=None):
        self.stream = stream
        self.simplified_tagset = simplified_tagset
        if tree_normalizer is None:
            tree_normalizer = SpanishTreeNormalizer(simplified_tagset, aggressive_normalization)
        self.tree_normalizer = tree_normalizer
        if tree_factory is None:
            tree_factory = LabeledTreeFactory()
        self.tree_factory = tree_factory

        self.sentences = None
        self.sent_idx = 0
        self.parse_error = None
        try:
            self.sentences = load_sentences(stream, encoding)
        except ParseFailure as e:
            logger.error("%s", e)
            self.parse_error = e

    @property
    def num_sentences(self):
        if self.sentences is None:
            return 0
        return len(self.sentences)

    def read_tree(self):
        """
        Return the next tree in the document, or None when there are no more trees

        Sentences which do not produce a tree are skipped
        """
        tree = None
        while tree is None and self.sentences is not None and self.sent_idx < len(self.sentences):
            sentence_id = self.sent_idx
            self.sent_idx += 1
            tree = self.build_tree(self.sentences[sentence_id])

            if tree is not None:
                tree = self.tree_normalizer.normalize_whole_tree(tree, self.tree_factory)
                tree.set_annotation(SENTENCE_ID, str(sentence_id))
        return tree

    def __iter__(self):
        tree = self.read_tree()
        while tree is not None:
            yield tree
            tree = self.read_tree()

    def close(self):
        """
        Close the underlying stream.  Safe to call more than once
        """
        try:
            if self.stream is not None:
                self.stream.close()
        except OSError:
            # nothing useful can be done if closing fails
            pass
        finally:
            self.stream = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()

    def build_tree(self, node):
        """
        Build the tree for the given element, or None if it has no words or empty categories
        """
        if is_word_node(node):
            return self.build_word_node(node)
        elif is_elliptic_node(node):
            return self.build_elliptic_node(node)

        children = []
        for child in node:
            # comments and processing instructions are not elements
            if not isinstance(child.tag, str):
                continue
            tree = self.build_tree(child)
            if tree is None:
                logger.debug("Discarding empty tree (root: %s)", child.tag)
            else:
                children.append(tree)

        if len(children) == 0:
            return None

        label = self.tree_normalizer.normalize_nonterminal(node.tag.strip())
        return self.tree_factory.new_tree_node(label, children)

    def build_word_node(self, node):
        """
        Build a preterminal for the word in the given element
        """
        word = get_word(node)
        pos = get_pos(node, word, self.simplified_tagset)
        pos = self.tree_normalizer.normalize_nonterminal(pos)
        lemma = node.get(ATTR_LEMMA)

        leaf_text = self.tree_normalizer.normalize_terminal(word)
        leaf = self.tree_factory.new_leaf(leaf_text)
        leaf.set_word(leaf_text)
        if lemma is not None:
            leaf.set_lemma(lemma)

        tree = self.tree_factory.new_tree_node(pos, [leaf])
        tree.set_tag(pos)
        return tree

    def build_elliptic_node(self, node):
        """
        Build a preterminal for an elided constituent, labeled with the element's name
        """
        leaf = self.tree_factory.new_leaf(EMPTY_LEAF)
        leaf.set_word(EMPTY_LEAF)
        return self.tree_factory.new_tree_node(node.tag, [leaf])

def read_xml_treebank(filename, encoding=None, simplified_tagset=False, aggressive_normalization=False,
                      tree_normalizer=None, tree_factory=None, use_tqdm=True):
    """
    Read all of the trees in the given XML file

    A file which cannot be parsed produces no trees, with the error logged
    """
    logger.info("Reading trees from %s", filename)
    with XMLTreeReader(open(filename, "rb"), encoding=encoding,
                       simplified_tagset=simplified_tagset,
                       aggressive_normalization=aggressive_normalization,
                       tree_normalizer=tree_normalizer, tree_factory=tree_factory) as reader:
        if reader.num_sentences > 1000 and use_tqdm:
            trees = list(tqdm(reader, total=reader.num_sentences))
        else:
            trees = list(reader)
    return trees

def read_xml_directory(dirname, **kwargs):
    """
    Read all of the trees in all of the .xml files in a directory
    """
    trees = []
    for filename in sorted(os.listdir(dirname)):
        if not filename.endswith(".xml"):
            continue
        full_name = os.path.join(dirname, filename)
        trees.extend(read_xml_treebank(full_name, **kwargs))
    return trees

def read_xml_text(text, **kwargs):
    """
    Read all of the trees from a string with an XML document in it
    """
    with XMLTreeReader(io.StringIO(text), **kwargs) as reader:
        return list(reader)
