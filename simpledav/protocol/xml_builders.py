"""
Pure functions for building WebDAV XML request bodies.
"""
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from lxml import etree

from simpledav.elements import dav
from simpledav.elements.base import BaseElement

## The properties asked for when listing directories or fetching resource info
DEFAULT_PROPS = [
    "displayname",
    "getcontentlength",
    "getcontenttype",
    "getlastmodified",
    "resourcetype",
]


def build_propfind_body(props: Optional[List[str]] = None) -> bytes:
    """
    Build PROPFIND request body XML.

    Args:
        props: List of property names to retrieve.  Defaults to
               DEFAULT_PROPS.  Unknown names are ignored.

    Returns:
        UTF-8 encoded XML bytes
    """
    if props is None:
        props = DEFAULT_PROPS
    prop_elements = []
    for prop_name in props:
        prop_element = _prop_name_to_element(prop_name)
        if prop_element is not None:
            prop_elements.append(prop_element)
    propfind = dav.Propfind() + (dav.Prop() + prop_elements)

    return etree.tostring(propfind.xmlelement(), encoding="utf-8", xml_declaration=True)


def _prop_name_to_element(name: str) -> Optional[BaseElement]:
    dav_props: Dict[str, Any] = {
        "displayname": dav.DisplayName,
        "getcontentlength": dav.GetContentLength,
        "getcontenttype": dav.GetContentType,
        "getlastmodified": dav.GetLastModified,
        "resourcetype": dav.ResourceType,
    }

    name_lower = name.lower().replace("_", "-")
    if name_lower in dav_props:
        return dav_props[name_lower]()
    return None
