"""
Crawl a website from a seed URL and report broken same-domain links.
"""
__version__ = "0.1.0"
