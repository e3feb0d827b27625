def build_search_prompt(query: str, limit: int) -> str:
    return (
        "You are a web search engine.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"results\": [{\"title\": \"...\", \"snippet\": \"...\", \"url\": \"https://...\"}]}\n"
        "Rules:\n"
        f"  - Return at most {limit} results.\n"
        "  - Only include pages you are confident exist; use full https URLs.\n"
        "  - Snippets are one or two sentences summarizing the page.\n"
        "  - Return {\"results\": []} if you know of nothing relevant.\n"
        "\n"
        f"query: {query}\n"
    )
