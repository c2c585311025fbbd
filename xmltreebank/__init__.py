from xmltreebank.constituency.parse_tree import Tree, LabeledTree
from xmltreebank.constituency.xml_tree_reader import XMLTreeReader, ParseFailure, read_xml_treebank, read_xml_directory
from xmltreebank._version import __version__

import logging
logger = logging.getLogger('xmltreebank')

# if the client application hasn't set the log level, we set it
# ourselves to INFO
if logger.level == 0:
    logger.setLevel(logging.INFO)

log_handler = logging.StreamHandler()
log_formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s: %(message)s",
                              datefmt='%Y-%m-%d %H:%M:%S')
log_handler.setFormatter(log_formatter)

# also, if the client hasn't added any handlers for this logger
# (or a default handler), we add a handler of our own
#
# client can later do
#   logger.removeHandler(xmltreebank.log_handler)
if not logger.hasHandlers():
    logger.addHandler(log_handler)
