from __future__ import annotations

from urllib.parse import quote_plus

SEARCH_URLS = {
    "Coursera": "https://www.coursera.org/search?query={query}",
    "edX": "https://www.edx.org/search?q={query}",
    "Udemy": "https://www.udemy.com/courses/search/?q={query}",
    "GitHub": "https://github.com/search?q={query}&type=repositories",
    "Documentation": "https://www.google.com/search?q={query}+official+documentation",
}


def search_url(provider: str, query: str) -> str:
    return SEARCH_URLS[provider].format(query=quote_plus(query))


def build_training_links(skills: list[str]) -> list[dict[str, str]]:
    top = skills[:3] if skills else ["career development"]
    query = " ".join(top)
    return [
        {
            "provider": "Coursera",
            "title": "Role-aligned courses",
            "url": search_url("Coursera", query),
        },
        {
            "provider": "edX",
            "title": "Professional certificates",
            "url": search_url("edX", query),
        },
        {
            "provider": "Udemy",
            "title": "Hands-on project tracks",
            "url": search_url("Udemy", query),
        },
    ]
