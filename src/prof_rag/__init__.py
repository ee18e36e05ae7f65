"""prof-rag: fuzzy professor-name resolution and review retrieval for RAG chat.

    from prof_rag import build_resolver

    resolver = build_resolver()
    result = await resolver.resolve("is prof müller good at stats?")
    prompt_context = result.context.to_prompt()
"""

__version__ = "0.1.0"

from prof_rag.resolver import ProfessorResolver, ResolutionResult, build_resolver  # noqa: E402

__all__ = ["ProfessorResolver", "ResolutionResult", "__version__", "build_resolver"]
