#!/usr/bin/env python
"""
Element classes double as tag constants for the parser (``dav.Href.tag``)
and as building blocks for request bodies:

    dav.Propfind() + (dav.Prop() + [dav.DisplayName(), dav.ResourceType()])
"""
import sys
from collections.abc import Iterable
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from simpledav.lib.namespace import nsmap

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    tag: ClassVar[Optional[str]] = None

    def __init__(self) -> None:
        self.children: List[BaseElement] = []

    def __add__(self, other: Union["BaseElement", Iterable["BaseElement"]]) -> Self:
        if isinstance(other, Iterable):
            self.children.extend(other)
        else:
            self.children.append(other)
        return self

    def xmlelement(self) -> _Element:
        if self.tag is None:
            raise ValueError("Unexpected value None for self.tag")
        root = etree.Element(self.tag, nsmap=nsmap)
        for child in self.children:
            root.append(child.xmlelement())
        return root
