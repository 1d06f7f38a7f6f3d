"""Incident geometry validation for the ingest collectors.

Validates untrusted GeoJSON produced by the incident crawlers (power
outages, heating disruptions, road closures), repairs transposed
latitude/longitude pairs, and hands back a clean ``FeatureCollection``
ready for the document store.
"""

__version__ = "0.1.0"
