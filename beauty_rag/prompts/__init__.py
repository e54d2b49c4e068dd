"""Prompt module.

Usage:
    from beauty_rag.prompts import AgentProfile, build_expert_prompt

    prompt = build_expert_prompt(
        AgentProfile(name="Amina", title="Experte Beauté"),
        context,
        tenant_name="Ahovi Cosmetics",
        is_first_message=False,
    )
"""

from beauty_rag.prompts.builder import AgentProfile, build_expert_prompt

__all__ = ["AgentProfile", "build_expert_prompt"]
