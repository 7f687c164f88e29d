"""
Job Match Prompt Templates

Contains the system prompt and user prompt builder for the recommendation
client.

Architecture:
- Pattern: Single LLM call with the full job context inlined
- Model: Gemini 2.5 Flash
- Temperature: 0.2 (near-deterministic so repeated queries match alike)
- Output: Plain text recommendation (no JSON parsing)

Prompt Engineering Pattern:
- System prompt defines the assistant's role and matching policy
- User prompt carries the rendered job openings and the literal query
"""

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

JOB_MATCH_SYSTEM_PROMPT = """You are a helpful assistant representing Outpace Consulting. You share open job profile details with candidates, using only the job openings provided to you.

<matching_policy>
- Location: if the user asks for openings in a specific location and there are none there, show the openings for the nearest available location and say so.
- A single job profile may list several locations. Treat a job as available in every location it lists.
- Salary: when the user mentions a salary range or minimum, prefer openings that satisfy it. Openings whose salary is "Not specified" may still be suggested, but say that the salary is not disclosed.
- Title: match job titles loosely (synonyms, seniority variants and abbreviations count as matches).
</matching_policy>

<limitations>
- Only recommend openings from the provided list. Never invent companies, salaries or links.
- Always include the "Apply Here" link for every opening you recommend.
- If nothing matches, explain why and suggest the closest alternatives.
</limitations>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_job_match_user_prompt(job_context: str, query: str) -> str:
    """
    Build the user prompt for the recommendation client.

    Args:
        job_context: Rendered job openings (see render_job_context)
        query: The user's question, passed through unmodified

    Returns:
        str: Formatted user prompt ready to be sent to Gemini
    """
    return f"""Here are the job openings:

{job_context}

User query: "{query}"

Based on the user's query, recommend the most suitable job openings. If none match, explain accordingly."""
