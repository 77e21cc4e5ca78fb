"""
Keyword retrieval over stored knowledge chunks.

Scores each chunk by the summed occurrence count of the query terms in
its lower-cased content and returns the best-scoring chunks. Ranking is
purely lexical; scores are not normalized by chunk length.

Dependencies: knowledge_assistant.models
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Iterable

from knowledge_assistant.models.chunk import KnowledgeChunk, ScoredChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


def query_terms(query: str) -> list[str]:
    """Lower-cased, whitespace-separated query terms."""
    return query.lower().split()


def score_chunk(terms: list[str], chunk: KnowledgeChunk) -> int:
    """
    Sum non-overlapping literal occurrences of every term in the chunk.

    Args:
        terms: Lower-cased query terms
        chunk: Candidate chunk

    Returns:
        int: Relevance score (0 when no term occurs)
    """
    content = chunk.content.lower()
    return sum(content.count(term) for term in terms)


class KeywordRetriever:
    """Term-frequency keyword retriever."""

    def __init__(self, top_k: int = DEFAULT_TOP_K) -> None:
        """
        Initialize retriever.

        Args:
            top_k: Maximum number of chunks to return
        """
        self.top_k = top_k

    def rank(self, query: str, chunks: Iterable[KnowledgeChunk]) -> list[ScoredChunk]:
        """
        Score and rank chunks against a query.

        Chunks scoring zero are dropped. The sort is stable, so equal
        scores keep their input order.

        Args:
            query: Free-text user query
            chunks: Candidate chunks

        Returns:
            list[ScoredChunk]: At most top_k hits, highest score first
        """
        terms = query_terms(query)
        if not terms:
            return []

        scored = [
            ScoredChunk(chunk=chunk, score=score)
            for chunk in chunks
            if (score := score_chunk(terms, chunk)) > 0
        ]
        scored.sort(key=lambda hit: hit.score, reverse=True)
        return scored[: self.top_k]

    def search(self, query: str, chunks: Iterable[KnowledgeChunk]) -> list[KnowledgeChunk]:
        """
        Retrieve the most relevant chunks for a query.

        An empty result means no grounding is available; it is not an error.

        Args:
            query: Free-text user query
            chunks: Every stored chunk

        Returns:
            list[KnowledgeChunk]: At most top_k chunks ranked by relevance
        """
        hits = self.rank(query, chunks)
        logger.debug("Keyword search", extra={"query": query, "hits": len(hits)})
        return [hit.chunk for hit in hits]
