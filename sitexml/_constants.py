"""Common literal values used across sitexml.

These constants keep endpoint query strings, form field names, and SiteXML
vocabulary centralized so the transport, the tree builder, and tests import the
same values without drifting. Intended for internal use within the sitexml
package.

Examples
--------
>>> from sitexml import _constants
>>> _constants.CONTENT_QUERY_TEMPLATE.format(cid=7)
'?cid=7'
>>> _constants.TAG_PAGE
'page'
"""

TREE_QUERY = "?sitexml"
CONTENT_QUERY_TEMPLATE = "?cid={cid}"

FORM_CONTENT_ID = "cid"
FORM_CONTENT = "content"
FORM_TREE = "sitexml"

TAG_SITE = "site"
TAG_PAGE = "page"
TAG_META = "meta"
TAG_CONTENT = "content"
TAG_THEME = "theme"

DEFAULT_FLAG = "yes"
TRUTHY_FLAGS = frozenset({"yes", "true", "1"})
START_PAGE_TYPE = "start"

DEFAULT_USER_AGENT = "sitexml-client/0.1"
