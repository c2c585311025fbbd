"""
Utilities for testing

A couple small documents in the format of the Spanish XML treebanks
"""

import io

from xmltreebank.constituency.xml_tree_reader import XMLTreeReader

# three sentences.  the second one has nothing but an empty constituent,
# so it should not produce a tree
THREE_SENTENCES = """<?xml version="1.0" encoding="UTF-8"?>
<article>
  <sentence>
    <sn func="suj">
      <grup.nom>
        <n lem="casa" pos="ncfs000" wd="casa"/>
      </grup.nom>
    </sn>
    <grup.verb>
      <v lem="ser" pos="vsip3s0" wd="es"/>
    </grup.verb>
    <f punct="period" wd="."/>
  </sentence>
  <sentence>
    <sn>
      <grup.nom/>
    </sn>
  </sentence>
  <sentence>
    <sn elliptic="yes" func="suj"/>
    <grup.verb>
      <v lem="llover" pos="vmip3s0" wd="Llueve"/>
    </grup.verb>
  </sentence>
</article>
"""

def read_text(text, **kwargs):
    """
    Build a reader over the given XML text
    """
    return XMLTreeReader(io.StringIO(text), **kwargs)
