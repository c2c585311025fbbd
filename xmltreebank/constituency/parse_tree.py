"""
Tree datastructure

Trees are immutable once built: a label plus a tuple of children.
A leaf is a Tree with no children, a preterminal is a Tree with exactly one leaf child.

LabeledTree additionally carries the word, lemma & tag of a node along
with arbitrary string annotations such as the id of the sentence a tree
came from.  The annotation setters exist on the base Tree as well, where
they do nothing, so code building trees never needs to check which kind
of tree it got from a factory.
"""

from collections import deque
from enum import Enum
from io import StringIO
import itertools

CLOSE_PAREN = ')'
SPACE_SEPARATOR = ' '
OPEN_PAREN = '('

EMPTY_CHILDREN = ()

# annotation key used for the position of a sentence in its document
SENTENCE_ID = 'sentence_id'

class TreePrintMethod(Enum):
    """
    Describes a few options for printing trees.

    This probably doesn't need to be used directly.  See __format__
    """
    ONE_LINE          = 1  # (ROOT (S ...  ))
    PRETTY            = 2  # multiple lines
    WORDS             = 3  # the leaves only, separated by spaces


class Tree:
    """
    A data structure to represent a parse tree
    """
    def __init__(self, label=None, children=None):
        if children is None:
            self.children = EMPTY_CHILDREN
        elif isinstance(children, Tree):
            self.children = (children,)
        else:
            self.children = tuple(children)

        self.label = label

    # optional capabilities.  a plain tree only knows its label
    def set_word(self, word):
        pass

    def set_lemma(self, lemma):
        pass

    def set_tag(self, tag):
        pass

    def set_annotation(self, key, value):
        pass

    def get_annotation(self, key, default=None):
        return default

    @property
    def word(self):
        return None

    @property
    def lemma(self):
        return None

    @property
    def tag(self):
        return None

    @property
    def sentence_id(self):
        return self.get_annotation(SENTENCE_ID)

    def is_leaf(self):
        return len(self.children) == 0

    def is_preterminal(self):
        return len(self.children) == 1 and len(self.children[0].children) == 0

    def yield_preterminals(self):
        """
        Yield the preterminals one at a time in order
        """
        if self.is_preterminal():
            yield self
            return

        if self.is_leaf():
            raise ValueError("Attempted to iterate preterminals on non-internal node")

        iterator = iter(self.children)
        node = next(iterator, None)
        while node is not None:
            if node.is_preterminal():
                yield node
            elif not node.is_leaf():
                iterator = itertools.chain(node.children, iterator)
            node = next(iterator, None)

    def leaf_labels(self):
        """
        Get the labels of the leaves
        """
        if self.is_leaf():
            return [self.label]

        return [x.children[0].label for x in self.yield_preterminals()]

    def __len__(self):
        return len(self.leaf_labels())

    def pretty_print(self, normalize=None):
        """
        Print with newlines & indentation on each line

        Preterminals and nodes whose children are all preterminals go on a single line
        """
        if normalize is None:
            normalize = lambda x: x.replace("(", "-LRB-").replace(")", "-RRB-")

        def one_line(node):
            return "%s%s %s%s" % (OPEN_PAREN, normalize(node.label), normalize(node.children[0].label), CLOSE_PAREN)

        with StringIO() as buf:
            # entries are (node, indent), or (CLOSE_PAREN, None) to end a bracket
            stack = deque()
            stack.append((self, 0))
            while len(stack) > 0:
                node, indent = stack.pop()
                if node is CLOSE_PAREN:
                    buf.write(CLOSE_PAREN)
                    if len(stack) == 0 or stack[-1][0] is not CLOSE_PAREN:
                        buf.write("\n")
                    continue

                if node.is_leaf():
                    buf.write("  " * indent)
                    buf.write(normalize(node.label))
                elif node.is_preterminal():
                    buf.write("  " * indent)
                    buf.write(one_line(node))
                elif all(x.is_preterminal() for x in node.children):
                    buf.write("  " * indent)
                    buf.write("%s%s " % (OPEN_PAREN, normalize(node.label)))
                    buf.write(" ".join(one_line(x) for x in node.children))
                    buf.write(CLOSE_PAREN)
                else:
                    buf.write("  " * indent)
                    buf.write("%s%s\n" % (OPEN_PAREN, normalize(node.label)))
                    stack.append((CLOSE_PAREN, None))
                    for child in reversed(node.children):
                        stack.append((child, indent + 1))
                    continue
                if len(stack) == 0 or stack[-1][0] is not CLOSE_PAREN:
                    buf.write("\n")

            return buf.getvalue()

    def __format__(self, spec):
        """
        Turn the tree into a string representing the tree

        Note that this is not a recursive traversal
        Otherwise, a tree too deep might blow up the call stack

        There is a type specific format:
          O       -> one line PTB format, which is the default anyway
          P       -> pretty print over multiple lines
          W       -> only the words, separated by spaces
        """
        if not spec or spec == 'O':
            print_format = TreePrintMethod.ONE_LINE
        elif spec == 'P':
            print_format = TreePrintMethod.PRETTY
        elif spec == 'W':
            print_format = TreePrintMethod.WORDS
        else:
            raise ValueError("Unknown tree format {}".format(spec))

        def normalize(text):
            return text.replace("(", "-LRB-").replace(")", "-RRB-")

        if print_format is TreePrintMethod.PRETTY:
            return self.pretty_print(normalize)
        if print_format is TreePrintMethod.WORDS:
            return " ".join(self.leaf_labels())

        with StringIO() as buf:
            stack = deque()
            stack.append(self)
            while len(stack) > 0:
                node = stack.pop()

                if isinstance(node, str):
                    buf.write(node)
                    continue
                if len(node.children) == 0:
                    if node.label is not None:
                        buf.write(normalize(node.label))
                    continue

                buf.write(OPEN_PAREN)
                if node.label is not None:
                    buf.write(normalize(node.label))
                stack.append(CLOSE_PAREN)
                for child in reversed(node.children):
                    stack.append(child)
                    stack.append(SPACE_SEPARATOR)
            return buf.getvalue()

    def __repr__(self):
        return "{}".format(self)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Tree):
            return False
        if self.label != other.label:
            return False
        if len(self.children) != len(other.children):
            return False
        return all(c1 == c2 for c1, c2 in zip(self.children, other.children))

class LabeledTree(Tree):
    """
    A Tree which also remembers the word, lemma, and tag of its node

    Any other string annotation, such as the sentence id, goes in annotations
    """
    def __init__(self, label=None, children=None):
        super().__init__(label, children)
        self._word = None
        self._lemma = None
        self._tag = None
        self.annotations = {}

    def set_word(self, word):
        self._word = word

    def set_lemma(self, lemma):
        self._lemma = lemma

    def set_tag(self, tag):
        self._tag = tag

    def set_annotation(self, key, value):
        self.annotations[key] = value

    def get_annotation(self, key, default=None):
        return self.annotations.get(key, default)

    @property
    def word(self):
        return self._word

    @property
    def lemma(self):
        return self._lemma

    @property
    def tag(self):
        return self._tag
