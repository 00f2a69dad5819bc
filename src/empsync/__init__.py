"""Reconcile employee CSV exports into a relational store."""
