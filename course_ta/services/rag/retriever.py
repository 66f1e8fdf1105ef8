"""
RAG Retriever Service

Finds course-material chunks that are semantically close to a student's
message, scoped to one course module.

How retrieval works:
1. The preprocessed sentence fragments are embedded as one batch with
   OpenAI embeddings. The first fragment's vector is the query vector.
2. At the same time, a handle to the Chroma collection is acquired
   (created on first use, then reused).
3. Chroma is queried for the top-K nearest chunks, restricted by a
   metadata filter to the module's namespace.
4. The metadata of each match is returned; it carries the chunk text and
   its source, and is passed to the LLM as context verbatim.
"""

import asyncio
import logging

import chromadb
from langchain_openai import OpenAIEmbeddings

from course_ta.core.config import Settings

logger = logging.getLogger(__name__)


class CourseRetriever:
    def __init__(self, settings: Settings, embeddings: OpenAIEmbeddings | None = None):
        self.settings = settings
        self.embeddings = embeddings or OpenAIEmbeddings(
            model=settings.embedding_model,
            api_key=settings.openai_api_key,
        )
        self._collection = None

    async def get_index(self):
        """Return the Chroma collection, connecting on first call."""
        if self._collection is not None:
            return self._collection

        client = await chromadb.AsyncHttpClient(
            host=self.settings.chroma_host,
            port=self.settings.chroma_port,
            ssl=self.settings.chroma_ssl,
            headers={"x-chroma-token": self.settings.chroma_api_key},
            tenant=self.settings.chroma_tenant,
            database=self.settings.chroma_database,
        )
        self._collection = await client.get_collection(self.settings.vector_index_name)
        logger.info("Connected to vector index '%s'", self.settings.vector_index_name)
        return self._collection

    async def retrieve(
        self,
        fragments: list[str],
        namespace: str,
        top_k: int | None = None,
    ) -> list[dict]:
        """
        Retrieve metadata of the nearest course chunks.

        Args:
            fragments: Preprocessed sentence fragments of the message
            namespace: Course module whose material is searched (e.g. "module-3")
            top_k: Number of matches (defaults to settings.top_k)

        Returns:
            Metadata dicts of the matches, nearest first. Errors from the
            embedding endpoint or the index propagate to the caller.
        """
        top_k = top_k or self.settings.top_k

        vectors, collection = await asyncio.gather(
            self.embeddings.aembed_documents(fragments),
            self.get_index(),
        )
        query_vector = vectors[0]

        result = await collection.query(
            query_embeddings=[query_vector],
            n_results=top_k,
            where={self.settings.namespace_field: namespace},
            include=["metadatas"],
        )
        # result["metadatas"] = [[meta1, meta2, ...]] (one list per query vector)
        metadatas = result["metadatas"][0] if result.get("metadatas") else []

        logger.info("Retrieved %d chunks from namespace '%s'", len(metadatas), namespace)
        return [meta or {} for meta in metadatas]
