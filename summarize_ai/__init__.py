"""SummarizeAI: LLM text summarization web app."""
