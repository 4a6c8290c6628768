"""Readers for graph and keyword input files."""

from .graph_files import Record, iter_records, parse_id_list, parse_keyword_list

__all__ = ["Record", "iter_records", "parse_id_list", "parse_keyword_list"]
