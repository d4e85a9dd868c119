"""Database schema for the amem index."""

# Executed with executescript(), which commits; never run inside a rebuild.
SCHEMA = """
PRAGMA journal_mode=WAL;

-- One row per corpus document
CREATE TABLE IF NOT EXISTS documents (
    path TEXT PRIMARY KEY,
    content_hash TEXT NOT NULL,
    modified_at INTEGER NOT NULL
);

-- Paragraph chunks, ordinal is 1-based per document
CREATE TABLE IF NOT EXISTS chunks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    path TEXT NOT NULL,
    chunk_text TEXT NOT NULL,
    ordinal INTEGER NOT NULL,
    updated_at INTEGER NOT NULL
);

-- Inverted index: single-character token -> chunk with term frequency
CREATE TABLE IF NOT EXISTS postings (
    token TEXT NOT NULL,
    chunk_id INTEGER NOT NULL,
    tf INTEGER NOT NULL CHECK (tf > 0),
    PRIMARY KEY (token, chunk_id),
    FOREIGN KEY (chunk_id) REFERENCES chunks(id) ON DELETE CASCADE
);

-- Distinct-chunk frequency per token
CREATE TABLE IF NOT EXISTS term_stats (
    token TEXT PRIMARY KEY,
    df INTEGER NOT NULL
);

-- Reserved for embedding vectors; retrieval does not read it
CREATE TABLE IF NOT EXISTS vector_cache (
    cache_key TEXT PRIMARY KEY,
    vector BLOB,
    created_at INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_postings_token ON postings(token);
CREATE INDEX IF NOT EXISTS idx_chunks_path ON chunks(path);
"""

# Cleared at the start of every rebuild. vector_cache is not content.
CONTENT_TABLES = ("postings", "chunks", "documents", "term_stats")
