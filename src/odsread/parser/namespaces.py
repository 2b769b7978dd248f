OFFICE_NS = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"
STYLE_NS = "urn:oasis:names:tc:opendocument:xmlns:style:1.0"
TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
TABLE_NS = "urn:oasis:names:tc:opendocument:xmlns:table:1.0"
FO_NS = "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0"
MANIFEST_NS = "urn:oasis:names:tc:opendocument:xmlns:manifest:1.0"

NS = {
    "office": OFFICE_NS,
    "style": STYLE_NS,
    "text": TEXT_NS,
    "table": TABLE_NS,
    "fo": FO_NS,
    "manifest": MANIFEST_NS,
}

PREFIXES = {uri: prefix for prefix, uri in NS.items()}
