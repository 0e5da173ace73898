"""Share menu for job postings."""
from urllib.parse import quote

from youthconnect.schemas.share import ShareLink, ShareMenu, ShareTarget

INSTAGRAM_URL = "https://www.instagram.com/"


def share_text(title: str, company: str) -> str:
    return f"Check out this job opportunity: {title} at {company}"


def build_share_link(target: ShareTarget, title: str, company: str) -> ShareLink:
    text = share_text(title, company)

    if target == ShareTarget.MESSAGING:
        return ShareLink(
            target=target,
            label="WhatsApp",
            url=f"https://wa.me/?text={quote(text, safe='')}",
            opens_new_window=True,
        )
    if target == ShareTarget.EMAIL:
        return ShareLink(
            target=target,
            label="Email",
            url=f"mailto:?subject={quote(title, safe='')}&body={quote(text, safe='')}",
            opens_new_window=False,
        )
    if target == ShareTarget.SOCIAL:
        # Instagram has no share-intent URL; link to the app
        return ShareLink(
            target=target,
            label="Instagram",
            url=INSTAGRAM_URL,
            opens_new_window=True,
        )
    raise ValueError(f"Unknown share target: {target}")


def build_share_menu(title: str, company: str) -> ShareMenu:
    """One link per share target, in menu order."""
    return ShareMenu(
        title="Share Job",
        share_text=share_text(title, company),
        links=[build_share_link(target, title, company) for target in ShareTarget],
    )
