"""
rag_pipeline — Retrieval-Augmented Generation pipeline.

Components:
  knowledge_base        — KnowledgeItem / KnowledgeBase model + JSON loader
  university_knowledge  — bundled university knowledge dataset
  text_processing       — tokenizer, stop words and suffix stemmer
  similarity            — lexical query ↔ knowledge-item similarity scorer
  retriever             — ranked search over the knowledge base
  context_formatter     — prompt context block + quick-answer rendering
  llm_engine            — Groq chat completions for RAG-grounded replies
"""
