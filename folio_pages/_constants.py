"""Common literal values used across folio_pages.

These constants keep the callout vocabulary and table-of-contents tuning in
one place so the annotator, renderer, templates, and tests agree on them.
Intended for internal use within the folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.CALLOUT_KINDS[0]
'insight'
>>> _constants.TOC_MIN_HEADINGS
3
"""

CALLOUT_KINDS = ("insight", "challenge", "decision", "metric", "note")
TOC_MIN_HEADINGS = 3
TOC_ROOT_MARGIN = "-80px 0px -70% 0px"
DEFAULT_READ_TIME = 5
