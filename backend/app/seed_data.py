"""Demo records loaded into a fresh process: interests, colleagues, static matches."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .user_profile import Interest, UserProfile


class MatchedUser(BaseModel):
    user_id: str
    full_name: str
    profile_photo_url: str | None = None
    location: str
    org: str
    role: str


class UserMatch(BaseModel):
    match_score: float = Field(ge=0.0, le=1.0)
    common_interests: List[str] = Field(default_factory=list)
    context: str
    user: MatchedUser


class Community(BaseModel):
    community_id: str
    name: str
    description: str
    slack_channel: str


class CommunityMatch(BaseModel):
    match_score: float = Field(ge=0.0, le=1.0)
    matching_interests: List[str] = Field(default_factory=list)
    community: Community


class NetworkNode(BaseModel):
    id: str
    name: str
    group: int


class NetworkLink(BaseModel):
    source: str
    target: str
    relationship: str


class NetworkGraph(BaseModel):
    nodes: List[NetworkNode] = Field(default_factory=list)
    links: List[NetworkLink] = Field(default_factory=list)


DEMO_INTERESTS: List[Interest] = [
    Interest(id=f"interest-uuid-{index}", name=name)
    for index, name in enumerate(
        [
            "Design Systems",
            "Hackathons",
            "Mentorship",
            "AI Ethics",
            "Community Building",
            "Product Strategy",
            "Data Storytelling",
            "Coffee Chats",
        ],
        start=1,
    )
]

_PHOTO = "https://images.unsplash.com/photo-{}?auto=format&fit=facearea&w=256&h=256"
_PHOTOS = {
    "ENA487": _PHOTO.format("1500648767791-00dcc994a43e"),
    "ENA492": _PHOTO.format("1521572267360-ee0c2909d518"),
    "ENA493": _PHOTO.format("1488426862026-3ee34a7d66df"),
    "ENA494": _PHOTO.format("1544723795-3fb6469f5b39"),
    "ENA495": _PHOTO.format("1529539795054-3c162aab037a"),
}


def _interests(*positions: int) -> List[Interest]:
    return [DEMO_INTERESTS[position] for position in positions]


def demo_profiles() -> List[UserProfile]:
    """Fresh copies of the seeded colleague profiles."""
    return [
        UserProfile(
            user_id="ENA487",
            username="rsenthilkumar",
            full_name="Rithvik Senthilkumar",
            profile_photo_url=_PHOTOS["ENA487"],
            location="Plano, TX",
            org="Cloud Platform",
            workspace="Plano Campus",
            interests=_interests(1, 2, 3, 7),
            bio="Associate Software Engineer helping TDPs ship ideas and grow their networks.",
            goals="Pair every new hire with a cross-site mentor in week one.",
        ),
        UserProfile(
            user_id="ENA492",
            username="avangoor",
            full_name="Ananya Vangoor",
            profile_photo_url=_PHOTOS["ENA492"],
            location="Plano, TX",
            org="Enterprise Product & Experience",
            workspace="Plano Campus",
            interests=_interests(0, 1, 2, 5),
            bio="Associate Software Engineer building programs that help TDPs find their people from day zero.",
            goals="Pilot OneMatch across cohorts and spark cross-site collaboration.",
        ),
        UserProfile(
            user_id="ENA493",
            username="jlin",
            full_name="Jacky Lin",
            profile_photo_url=_PHOTOS["ENA493"],
            location="Plano, TX",
            org="Card Tech",
            workspace="Plano Campus",
            interests=_interests(0, 4, 5),
            bio="Associate Software Engineer focused on inclusive experiences and mentorship programs.",
            goals="Scale the design system guild across cohorts.",
        ),
        UserProfile(
            user_id="ENA494",
            username="kalkaderi",
            full_name="Kausar Alkaderi",
            profile_photo_url=_PHOTOS["ENA494"],
            location="Plano, TX",
            org="Enterprise Platforms",
            workspace="Plano Campus",
            interests=_interests(4, 7),
            bio="Associate Software Engineer matching people to conversations that move careers forward.",
            goals="Pilot weekly coffee chat rotations for TDP newcomers.",
        ),
        UserProfile(
            user_id="ENA495",
            username="mstraughn",
            full_name="Matthew Straughn",
            profile_photo_url=_PHOTOS["ENA495"],
            location="Plano, TX",
            org="Enterprise Data",
            workspace="Plano Campus",
            interests=_interests(3, 6),
            bio="Associate Software Engineer running responsible AI salons and storytelling workshops.",
            goals="Bring more voices into the Responsible AI roundtable.",
        ),
    ]


USER_MATCHES: List[UserMatch] = [
    UserMatch(
        match_score=0.92,
        common_interests=["Hackathons", "Mentorship"],
        context="You co-led the Spring 2024 TDP hackathon onboarding circle.",
        user=MatchedUser(
            user_id="ENA492",
            full_name="Ananya Vangoor",
            profile_photo_url=_PHOTOS["ENA492"],
            location="Plano, TX",
            org="Enterprise Product & Experience",
            role="Associate Software Engineer",
        ),
    ),
    UserMatch(
        match_score=0.88,
        common_interests=["Hackathons", "Coffee Chats"],
        context="Partnered with you on a hackathon showcase and the design system sprint for the TDP welcome portal.",
        user=MatchedUser(
            user_id="ENA493",
            full_name="Jacky Lin",
            profile_photo_url=_PHOTOS["ENA493"],
            location="Plano, TX",
            org="Card Tech",
            role="Associate Software Engineer",
        ),
    ),
    UserMatch(
        match_score=0.81,
        common_interests=["Coffee Chats", "Mentorship"],
        context="You both run weekly coffee chat rotations for new hires and share mentorship playbooks.",
        user=MatchedUser(
            user_id="ENA494",
            full_name="Kausar Alkaderi",
            profile_photo_url=_PHOTOS["ENA494"],
            location="Plano, TX",
            org="Enterprise Platforms",
            role="Associate Software Engineer",
        ),
    ),
    UserMatch(
        match_score=0.78,
        common_interests=["AI Ethics", "Coffee Chats"],
        context="Matthew is piloting responsible AI sessions that align with your community goals.",
        user=MatchedUser(
            user_id="ENA495",
            full_name="Matthew Straughn",
            profile_photo_url=_PHOTOS["ENA495"],
            location="McLean, VA",
            org="Enterprise Data",
            role="Associate Software Engineer",
        ),
    ),
]

COMMUNITY_MATCHES: List[CommunityMatch] = [
    CommunityMatch(
        match_score=0.96,
        matching_interests=["Hackathons", "Design Systems"],
        community=Community(
            community_id="comm-uuid-1",
            name="Capital One Builders Guild",
            description="Build, ship, and demo passion projects alongside fellow TDPs across tech stacks.",
            slack_channel="#tdp-builders",
        ),
    ),
    CommunityMatch(
        match_score=0.91,
        matching_interests=["Community Building", "Coffee Chats"],
        community=Community(
            community_id="comm-uuid-2",
            name="Wellness Warriors DFW",
            description="Weekend pickleball ladders, hiking meetups, and coffee chat pairings in DFW.",
            slack_channel="#tdp-wellness-dfw",
        ),
    ),
    CommunityMatch(
        match_score=0.87,
        matching_interests=["AI Ethics", "Data Storytelling"],
        community=Community(
            community_id="comm-uuid-3",
            name="Responsible AI Roundtable",
            description="Monthly salons to explore fairness, transparency, and responsible AI in Capital One products.",
            slack_channel="#tdp-ai-ethics",
        ),
    ),
]

NETWORK_GRAPH = NetworkGraph(
    nodes=[
        NetworkNode(id="ENA487", name="Rithvik Senthilkumar", group=1),
        NetworkNode(id="ENA492", name="Ananya Vangoor", group=2),
        NetworkNode(id="ENA493", name="Jacky Lin", group=3),
        NetworkNode(id="ENA494", name="Kausar Alkaderi", group=2),
        NetworkNode(id="ENA495", name="Matthew Straughn", group=3),
    ],
    links=[
        NetworkLink(source="ENA487", target="ENA492", relationship="Hackathon Teammate"),
        NetworkLink(source="ENA487", target="ENA493", relationship="Design System Sprint"),
        NetworkLink(source="ENA487", target="ENA494", relationship="Coffee Chat Rotation"),
        NetworkLink(source="ENA492", target="ENA495", relationship="AI Guild"),
        NetworkLink(source="ENA493", target="ENA494", relationship="Community Launch"),
    ],
)

__all__ = [
    "COMMUNITY_MATCHES",
    "Community",
    "CommunityMatch",
    "DEMO_INTERESTS",
    "MatchedUser",
    "NETWORK_GRAPH",
    "NetworkGraph",
    "NetworkLink",
    "NetworkNode",
    "USER_MATCHES",
    "UserMatch",
    "demo_profiles",
]
