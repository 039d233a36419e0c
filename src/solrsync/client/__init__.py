"""Solr client used by the destination adapter.

Quick start::

    from solrsync.client import SolrClient

    client = SolrClient("http://localhost:8983/solr", collection="content")
    result = client.select(client.create_select(query="*:*", rows=10))
"""

from solrsync.client.solr import SolrClient

__all__ = ["SolrClient"]
