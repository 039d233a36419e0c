"""Destination adapter layer — Connectors a synchronization framework writes to.

Built-in adapters:
  - solr: Apache Solr v8+ (batched updates via the JSON update handler)

Implement ``DestinationAdapter`` to synchronize into your own backend.
"""
