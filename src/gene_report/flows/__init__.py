"""Prefect flows.

- report.py - build_gene_report: fetch -> store -> join -> render for one gene
"""
