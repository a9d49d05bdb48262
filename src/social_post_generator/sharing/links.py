"""Share link builder - per-platform deep links from the committed draft.

Pure functions: no I/O, no state. Every supported platform always gets
exactly one target, even when the text is empty; front ends decide whether
to enable them from the generation state.
"""

from __future__ import annotations

from urllib.parse import quote

from ..constants import ShareAction, SharePlatform
from .models import ShareTarget

# Characters JavaScript's encodeURIComponent leaves unescaped
# (on top of the letters, digits and "_.-~" that quote() never escapes)
_URI_COMPONENT_SAFE = "!*'()"

TWITTER_INTENT_URL = "https://twitter.com/intent/tweet"
LINKEDIN_SHARE_URL = "https://www.linkedin.com/shareArticle"
FACEBOOK_SHARER_URL = "https://www.facebook.com/sharer/sharer.php"

INSTAGRAM_INSTRUCTION = (
    "Instagram sharing requires the Instagram app. Copy the text and share manually."
)


def encode_component(value: str) -> str:
    """Percent-encode a query value like encodeURIComponent."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def twitter_target(text: str, page_url: str | None = None) -> ShareTarget:
    url = f"{TWITTER_INTENT_URL}?text={encode_component(text)}"
    if page_url:
        url += f"&url={encode_component(page_url)}"
    return ShareTarget(SharePlatform.TWITTER, ShareAction.LINK, text, url=url)


def linkedin_target(text: str, page_url: str | None = None) -> ShareTarget:
    url = (
        f"{LINKEDIN_SHARE_URL}?mini=true"
        f"&url={encode_component(page_url or '')}"
        f"&title={encode_component(text)}"
    )
    return ShareTarget(SharePlatform.LINKEDIN, ShareAction.LINK, text, url=url)


def facebook_target(text: str, page_url: str | None = None) -> ShareTarget:
    # Facebook ignores prefilled text, the user types it in the share dialog
    url = f"{FACEBOOK_SHARER_URL}?u={encode_component(page_url or '')}"
    return ShareTarget(SharePlatform.FACEBOOK, ShareAction.LINK, text, url=url)


def instagram_target(text: str, page_url: str | None = None) -> ShareTarget:
    return ShareTarget(
        SharePlatform.INSTAGRAM,
        ShareAction.MANUAL_COPY,
        text,
        instruction=INSTAGRAM_INSTRUCTION,
    )


class ShareLinkBuilder:
    """Builds the ordered share targets for a committed draft.

    Usage:
        targets = ShareLinkBuilder.build("Launch day!", "https://example.com")
        for target in targets:
            print(target.label, target.url or target.instruction)
    """

    _builders = {
        SharePlatform.TWITTER: twitter_target,
        SharePlatform.LINKEDIN: linkedin_target,
        SharePlatform.FACEBOOK: facebook_target,
        SharePlatform.INSTAGRAM: instagram_target,
    }

    @classmethod
    def build(cls, committed_text: str, page_url: str | None = None) -> list[ShareTarget]:
        """Build one target per platform, in display order."""
        return [cls.build_for(platform, committed_text, page_url) for platform in SharePlatform]

    @classmethod
    def build_for(
        cls,
        platform: SharePlatform | str,
        committed_text: str,
        page_url: str | None = None,
    ) -> ShareTarget:
        """Build the target for a single platform.

        Raises:
            ValueError: If platform is not supported.
        """
        if isinstance(platform, str):
            platform = platform.lower()
        try:
            platform = SharePlatform(platform)
        except ValueError:
            available = ", ".join(p.value for p in SharePlatform)
            raise ValueError(f"Unknown platform: {platform}. Available: {available}") from None
        return cls._builders[platform](committed_text, page_url)
