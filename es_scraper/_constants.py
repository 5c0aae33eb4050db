"""Common literal values used across es_scraper.

These constants keep artifact filenames, document anchors, and structural
markers centralized so the extractor, the config loader, and tests can import
the same values without drifting.

Examples
--------
>>> from es_scraper import _constants
>>> _constants.TOC_FILENAME
'toc.json'
>>> _constants.ATTRIBUTES_MARKER in "This property has the attributes { }."
True
"""

SPEC_FILENAME = "spec.html"
TOC_FILENAME = "toc.json"
CATALOG_FILENAME = "data.json"
GENERATED_DIR = "generated"

TYPED_ARRAY_ANCHOR = "table-the-typedarray-constructors"
NATIVE_ERROR_ANCHOR = "sec-native-error-types-used-in-this-standard"

ATTRIBUTES_MARKER = "has the attributes"
DEFAULT_DATA_ATTRIBUTES = "wc"

FIRST_OBJECTS_CLAUSE = "Fundamental Objects"
LAST_OBJECTS_CLAUSE = "Reflection"
GLOBAL_OBJECT_CLAUSE = "The Global Object"

TYPED_ARRAY_PLACEHOLDER = "_TypedArray_"
NATIVE_ERROR_PLACEHOLDER = "_NativeError_"
NATIVE_ERROR_TEMPLATE = "_NativeError_ Object Structure"
