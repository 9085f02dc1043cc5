"""Unified command-line interface for receiptsplit.

Usage:
    receiptsplit parse <text_file>
    receiptsplit split <text_file> --person Alice --person Bob --assign 1=Alice,Bob
    receiptsplit scan <image> [--ocr-url URL]
"""
