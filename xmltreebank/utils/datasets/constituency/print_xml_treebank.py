"""
Prints the trees in one or more XML treebank files

Useful for checking what the reader does with a particular file,
or for searching a treebank for a particular tag or word:

  python3 -m xmltreebank.utils.datasets.constituency.print_xml_treebank --search_pos "^pr" --search_word "^que$" *.xml

Each tree is printed on one line, prefixed with the file name and the
id of the sentence it came from
"""

import argparse
import logging
import os
import re
import sys

from xmltreebank.constituency.xml_tree_reader import XMLTreeReader
from xmltreebank.utils.get_tqdm import get_tqdm

tqdm = get_tqdm()

logger = logging.getLogger('xmltreebank.constituency')

def should_print_tree(tree, pos=None, word=None):
    """
    Determine if the given tree contains a leaf which matches the part-of-speech and lexical criteria

    pos: regular expression to match the tag of a preterminal.  None means any tag
    word: regular expression to match the word under that preterminal.  None means any word
    """
    if isinstance(pos, str):
        pos = re.compile(pos)
    if isinstance(word, str):
        word = re.compile(word)

    for preterminal in tree.yield_preterminals():
        if pos is not None and not pos.search(preterminal.label):
            continue
        if word is not None and not word.search(preterminal.children[0].label):
            continue
        return True
    return False

def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="Print the trees in XML treebank files, optionally only those containing a particular tag or word"
    )

    parser.add_argument(
        'files',
        nargs='+',
        help='XML treebank files to read'
    )
    parser.add_argument(
        '--plain',
        action='store_true',
        default=False,
        help='Print only the words of each tree rather than the bracketed tree'
    )
    parser.add_argument(
        '--search_pos',
        default=None,
        help='Only print trees which contain a tag matching this regular expression'
    )
    parser.add_argument(
        '--search_word',
        default=None,
        help='Only print trees which contain a word matching this regular expression'
    )
    parser.add_argument(
        '--encoding',
        default=None,
        help='Encoding of the files.  By default, use the encoding declared in each file'
    )
    parser.add_argument(
        '--simplified_tagset',
        default=True,
        action='store_true',
        help='Reduce the tags to the simplified tagset'
    )
    parser.add_argument(
        '--no_simplified_tagset',
        dest='simplified_tagset',
        action='store_false',
        help='Keep the full tags'
    )
    parser.add_argument(
        '--aggressive_normalization',
        default=True,
        action='store_true',
        help='Split multiword tokens into separate words'
    )
    parser.add_argument(
        '--no_aggressive_normalization',
        dest='aggressive_normalization',
        action='store_false',
        help='Keep multiword tokens as single words'
    )
    parser.add_argument(
        '--output_file',
        default=None,
        help='Where to write the trees.  By default, they are written to stdout'
    )

    args = parser.parse_args(args=args)
    return args

def print_trees(args, fout):
    """
    Read each file in args.files, writing the matching trees to fout

    Returns the total number of trees read
    """
    pos_pattern = re.compile(args.search_pos) if args.search_pos else None
    word_pattern = re.compile(args.search_word) if args.search_word else None
    tree_format = "{:W}" if args.plain else "{}"

    total_trees = 0
    for filename in tqdm(args.files):
        canonical_name = os.path.splitext(os.path.basename(filename))[0]
        num_trees = 0
        with XMLTreeReader(open(filename, "rb"), encoding=args.encoding,
                           simplified_tagset=args.simplified_tagset,
                           aggressive_normalization=args.aggressive_normalization) as reader:
            for tree in reader:
                num_trees += 1
                if not should_print_tree(tree, pos_pattern, word_pattern):
                    continue
                fout.write("%s-%s\t%s\n" % (canonical_name, tree.sentence_id, tree_format.format(tree)))
        logger.info("%s: %d trees", os.path.basename(filename), num_trees)
        total_trees += num_trees

    logger.info("Read %d trees", total_trees)
    return total_trees

def main(args=None):
    args = parse_args(args)

    if args.output_file:
        with open(args.output_file, "w", encoding="utf-8") as fout:
            print_trees(args, fout)
    else:
        print_trees(args, sys.stdout)

if __name__ == '__main__':
    main()
