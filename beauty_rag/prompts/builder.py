"""Expert Prompt Builder.

Merges the retrieved context with the fixed expertise, rules, sales guide
and style sections into one system prompt. The only branch is on whether
this is the first turn: the first reply must open with the configured
greeting, later replies must not greet at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from beauty_rag.prompts import templates
from beauty_rag.retrieval.records import optional_str, resolve_field


@dataclass(frozen=True)
class AgentProfile:
    """Display configuration of the tenant's sales agent.

    Every field is optional; ``resolved_*`` properties apply the defaults.
    ``welcome_message`` also accepts the camel-case ``welcomeMessage`` key
    when built from a mapping.
    """

    name: str | None = None
    title: str | None = None
    welcome_message: str | None = None
    personality: str | None = None

    @property
    def resolved_name(self) -> str:
        return self.name or templates.DEFAULT_AGENT_NAME

    @property
    def resolved_title(self) -> str:
        return self.title or templates.DEFAULT_AGENT_TITLE

    @property
    def resolved_welcome(self) -> str:
        return self.welcome_message or templates.DEFAULT_WELCOME.format(name=self.resolved_name)

    @property
    def resolved_personality(self) -> str:
        return self.personality or templates.DEFAULT_PERSONALITY

    @classmethod
    def coerce(cls, source: Any) -> AgentProfile:
        if isinstance(source, cls):
            return source
        if source is None:
            return cls()
        return cls(
            name=optional_str(resolve_field(source, "name")),
            title=optional_str(resolve_field(source, "title")),
            welcome_message=optional_str(resolve_field(source, "welcome_message", "welcomeMessage")),
            personality=optional_str(resolve_field(source, "personality")),
        )


def build_expert_prompt(
    agent: AgentProfile | Any,
    relevant_context: str,
    tenant_name: str | None = None,
    is_first_message: bool = True,
) -> str:
    """Build the system prompt for one reply.

    Args:
        agent: AgentProfile, mapping or object with the profile fields
        relevant_context: Output of ``get_relevant_context``, inserted verbatim
        tenant_name: Shop name (default: "notre marque")
        is_first_message: True on the first turn of a conversation

    Returns:
        The assembled system prompt
    """
    profile = AgentProfile.coerce(agent)
    tenant = tenant_name or templates.DEFAULT_TENANT_NAME

    if is_first_message:
        greeting = templates.FIRST_TURN_GREETING.format(welcome=profile.resolved_welcome)
    else:
        greeting = templates.FOLLOW_UP_NO_GREETING

    blocks = [
        templates.IDENTITY.format(
            name=profile.resolved_name,
            title=profile.resolved_title,
            tenant=tenant,
        ),
        templates.CONTEXT_HEADER.format(tenant_upper=tenant.upper()),
        relevant_context,
        templates.EXPERTISE,
        templates.RULES,
        templates.GREETING_HEADER,
        greeting,
        templates.SALES_GUIDE,
        templates.STYLE.format(personality=profile.resolved_personality),
    ]
    return "\n\n".join(blocks)
