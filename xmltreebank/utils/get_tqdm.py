import sys

from tqdm import tqdm as base_tqdm

def get_tqdm():
    """
    Return a tqdm appropriate for the situation

    This replaces `import tqdm`, so for example, you do this:
      from xmltreebank.utils.get_tqdm import get_tqdm
      tqdm = get_tqdm()
    then do this when you want a progress bar or regular iterator depending on context:
      tqdm(list)

    If stderr is not a terminal, the returned tqdm is disabled
    unless disable=False is specifically set.
    """
    if sys.stderr is not None and sys.stderr.isatty():
        return base_tqdm

    def hidden_tqdm(*args, **kwargs):
        kwargs.setdefault("disable", True)
        return base_tqdm(*args, **kwargs)

    return hidden_tqdm
