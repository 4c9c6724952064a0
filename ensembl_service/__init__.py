"""Ensembl Plants sequence lookup exposed as a pluggable service."""
