"""Parsers for cluster list documents."""

from kuberviz.controllers.cluster.parsers.list_parser import ListParser

__all__ = ["ListParser"]
