"""
Part of speech handling for the EAGLES tagset used in the Spanish XML treebanks

guess_pos makes up for missing part-of-speech labels on word nodes
simplify_tag reduces a full EAGLES tag to the simplified tagset
"""

ATTR_NAMED_ENTITY = "ne"
ATTR_POSTYPE = "postype"
ATTR_PUNCT = "punct"

def guess_pos(tag_name, attributes, word, simplified_tagset=False):
    """
    Guess the part of speech of a word node which has no pos attribute

    tag_name: the name of the XML element, such as 'p' or 'z'
    attributes: a mapping of the element's attributes
    word: the word already extracted from the node
    simplified_tagset: allows a couple broader inferences

    Returns the empty string if no heuristic applies
    """
    named_entity = attributes.get(ATTR_NAMED_ENTITY, "")
    if named_entity == "date":
        return "w"
    elif named_entity == "number":
        return "z0"

    if tag_name == "i":
        return "i"
    elif tag_name == "r":
        return "rg"
    elif tag_name == "z":
        return "z0"

    # "que" is ambiguous between a conjunction and a relative pronoun
    pos_type = attributes.get(ATTR_POSTYPE, "")
    if tag_name == "c" and pos_type == "subordinating":
        return "cs"
    elif tag_name == "p" and pos_type == "relative" and word.lower() == "que":
        return "pr0cn000"

    if simplified_tagset and tag_name == "a":
        return "aq0000"

    if ATTR_PUNCT in attributes:
        return "f"

    return ""

def keep_prefix(pos, keep, width):
    """
    Keep the first keep characters of a tag, zero padding it to width

    Truncated tags are padded as well, so every simplified tag of a category has the same width
    """
    return pos[:keep].ljust(width, '0')

def simplify_tag(pos):
    """
    Reduce an EAGLES tag to the simplified tagset

    The simplified tags keep the category and type of a word, dropping
    most of the morphological analysis
    """
    if not pos:
        return pos

    category = pos[0]
    if category == 'd':
        # determiner: keep category & type
        return keep_prefix(pos, 2, 6)
    elif category == 's':
        # preposition: keep category & type
        return keep_prefix(pos, 2, 5)
    elif category == 'p':
        # pronoun: keep category & type
        return keep_prefix(pos, 2, 8)
    elif category == 'a':
        # adjective: keep category, type & grade
        return keep_prefix(pos, 3, 6)
    elif category == 'n':
        # noun: keep category, type, number & the NE label
        ner_label = pos[6] if len(pos) == 7 else '0'
        padded = pos.ljust(4, '0')
        return padded[:2] + '0' + padded[3] + "00" + ner_label
    elif category == 'v':
        # verb: keep category, type, mood & tense
        return keep_prefix(pos, 4, 7)

    # adverbs, conjunctions, punctuation, numbers, dates, interjections
    return pos
