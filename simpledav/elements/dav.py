#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from simpledav.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("D", "propfind")


# Components / Data
class Prop(BaseElement):
    tag: ClassVar[str] = ns("D", "prop")


class Collection(BaseElement):
    tag: ClassVar[str] = ns("D", "collection")


# Properties
class ResourceType(BaseElement):
    tag: ClassVar[str] = ns("D", "resourcetype")


class DisplayName(BaseElement):
    tag: ClassVar[str] = ns("D", "displayname")


class GetContentLength(BaseElement):
    tag: ClassVar[str] = ns("D", "getcontentlength")


class GetContentType(BaseElement):
    tag: ClassVar[str] = ns("D", "getcontenttype")


class GetLastModified(BaseElement):
    tag: ClassVar[str] = ns("D", "getlastmodified")


# Multistatus response structure
class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("D", "multistatus")


class Response(BaseElement):
    tag: ClassVar[str] = ns("D", "response")


class Href(BaseElement):
    tag: ClassVar[str] = ns("D", "href")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("D", "propstat")


class Status(BaseElement):
    tag: ClassVar[str] = ns("D", "status")
