"""Apache Solr destination adapter."""

from solrsync.adapters.solr.adapter import SolrDestinationAdapter, normalize_object_class

__all__ = ["SolrDestinationAdapter", "normalize_object_class"]
