"""
RAG (Retrieval-Augmented Generation) Pipeline

Grounds the assistant's answers in course material by:
1. Embedding the student's (preprocessed) message
2. Retrieving the nearest chunks from the vector index, within the
   namespace of the selected course module
3. Handing the chunk metadata to the LLM as extra context
"""

from course_ta.services.rag.retriever import CourseRetriever

__all__ = [
    "CourseRetriever",
]
