"""Collector-facing activities.

Each activity is a thin, logged adapter between a crawler and the
validation engine in ``incident_geo.validation``.
"""
