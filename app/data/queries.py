from __future__ import annotations

VOICINGS_TABLE = "voicings"

# voicings joined with their layer (word) and essences -> images, one round trip
RECENT_VOICINGS_SELECT = (
    "id,"
    "content,"
    "created_at,"
    "layer:layers(word),"
    "essences(content,images(image_url))"
)


def q_recent_voicings(limit: int) -> dict[str, str]:
    """Newest voicings first, bounded to a single page."""
    return {
        "select": RECENT_VOICINGS_SELECT,
        "order": "created_at.desc",
        "limit": str(limit),
    }


def q_delete_voicing(voicing_id: str) -> dict[str, str]:
    return {"id": f"eq.{voicing_id}"}
