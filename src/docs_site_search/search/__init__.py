"""
Search indexing and result enrichment package.

This package provides a pure-Python site search stack:
- charsets: Cyrillic/CJK detection for index routing
- analyzers: Tokenizers, filters and per-script tokenizer profiles
- schema: Searchable page fields, boosts and query plans
- full_text_index: In-memory BM25 index over pages
- router: Primary and auxiliary index construction
- executor: Query fan-out, dedup and enrichment
- locator, headings, snippet: Match location and display fields
- grouping: Parent-page grouping of results
"""
