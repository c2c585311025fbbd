"""
Factories which build the nodes of a tree

The XML reader builds every node through a factory, so the caller
decides whether the trees carry lemmas and other annotations.
"""

from xmltreebank.constituency.parse_tree import Tree, LabeledTree

class TreeFactory:
    """
    Builds plain Tree nodes, which only know their labels
    """
    tree_class = Tree

    def new_leaf(self, text):
        return self.tree_class(label=text)

    def new_tree_node(self, label, children):
        children = list(children)
        if len(children) == 0:
            raise ValueError("Cannot build a tree node with no children.  Label: {}".format(label))
        return self.tree_class(label=label, children=children)

class LabeledTreeFactory(TreeFactory):
    """
    Builds LabeledTree nodes, which can hold words, lemmas, tags and annotations
    """
    tree_class = LabeledTree
