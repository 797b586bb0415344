"""Prompt templates for prsummary"""


def compress_changes(content: str) -> str:
    """Prompt asking the local model to compress raw git changes"""
    return f"""Compress and summarize the following git changes into a concise but informative format,
preserving the most important technical details:

{content}

Compressed summary:"""


def summary_with_embeddings(encoded_embedding: str, compressed: str, content: str) -> str:
    """Remote prompt when the local pipeline produced an embedding"""
    return f"""Here are the Git changes with their semantic embeddings:

Embeddings: {encoded_embedding}

Compressed Changes:
{compressed}

Original Content Summary:
{content}

Based on these changes, provide a concise summary of the modifications:"""


def summary(content: str) -> str:
    """Remote prompt over the raw changes"""
    return f"""Here are the Git changes for a pull request:

{content}

Based on these changes, provide a concise summary of the modifications:"""
