# data/events.py
"""World events. `effects` keys are limited to the StatDelta fields."""
from __future__ import annotations

# ==================== STUDENTS ====================
STUDENT_EVENTS: list[dict] = [
    {
        "id": "student-1",
        "title": "Group Project Nightmare",
        "description": "Your teammates didn't contribute. You carried the entire project.",
        "effects": {"stress": 15, "coding": 3, "energy": -10},
    },
    {
        "id": "student-2",
        "title": "Professor Liked Your Code",
        "description": "Your assignment was used as an example in class. Feels good!",
        "effects": {"reputation": 3, "stress": -10, "coding": 2},
    },
    {
        "id": "student-3",
        "title": "Study Group Success",
        "description": "Late-night study session with friends paid off. You all aced the exam!",
        "effects": {"stress": -15, "coding": 2},
    },
    {
        "id": "student-4",
        "title": "Scholarship Opportunity",
        "description": "You won a small coding competition. Prize money helps!",
        "effects": {"money": 500, "reputation": 3, "stress": -5},
    },
    {
        "id": "student-5",
        "title": "Finals Week Stress",
        "description": "Three exams in two days. Coffee is your best friend now.",
        "effects": {"stress": 20, "energy": -15},
    },
    {
        "id": "student-6",
        "title": "Campus Hackathon Win",
        "description": "Your team won the local hackathon! Free pizza and glory.",
        "effects": {"coding": 5, "reputation": 5, "money": 200, "stress": -5},
    },
]

# ==================== NO JOB / SCRIPT KIDDIE ====================
UNEMPLOYED_EVENTS: list[dict] = [
    {
        "id": "unemployed-1",
        "title": "Tutorial Hell",
        "description": "You've watched 50 tutorials but haven't built anything. Time to code!",
        "effects": {"stress": 10, "coding": 1},
    },
    {
        "id": "unemployed-2",
        "title": "Freelance Client Found You",
        "description": "Someone needs a quick website. Easy money!",
        "effects": {"money": 300, "reputation": 2},
    },
    {
        "id": "unemployed-3",
        "title": "Imposter Syndrome Hits",
        "description": "Everyone else seems so much better. But you're learning!",
        "effects": {"stress": 15, "energy": -10},
    },
    {
        "id": "unemployed-4",
        "title": "Reddit Post Goes Viral",
        "description": "You shared your learning journey. People are inspired!",
        "effects": {"reputation": 5, "stress": -10},
    },
]

# ==================== EMPLOYED (level 2+) ====================
EMPLOYED_EVENTS: list[dict] = [
    {
        "id": "event-1",
        "title": "Server Outage at 3 AM",
        "description": "Production is down. Your phone is ringing.",
        "effects": {"stress": 20, "energy": -15},
    },
    {
        "id": "event-2",
        "title": "Pull Request Approved!",
        "description": "Your feature got merged. The senior dev left a nice comment.",
        "effects": {"reputation": 3, "stress": -5},
    },
    {
        "id": "event-3",
        "title": "Coffee Machine Broke",
        "description": "The office coffee machine died. It's going to be a rough week.",
        "effects": {"energy": -10, "stress": 5},
    },
    {
        "id": "event-4",
        "title": "Bug Bounty Payout",
        "description": "That security issue you reported paid out!",
        "effects": {"money": 500, "reputation": 2},
    },
    {
        "id": "event-5",
        "title": "Conference Invitation",
        "description": "You got invited to speak at a tech conference. Travel expenses covered!",
        "effects": {"reputation": 5, "stress": 10},
    },
    {
        "id": "event-7",
        "title": "Legacy Code Discovery",
        "description": "You found a 10-year-old codebase with no tests. Someone has to maintain it.",
        "effects": {"stress": 15, "coding": 2},
    },
    {
        "id": "event-9",
        "title": "Surprise Deadline",
        "description": "Client moved the deadline up by two weeks. Panic mode activated.",
        "effects": {"stress": 25, "energy": -20},
    },
    {
        "id": "event-12",
        "title": "API Keys Leaked",
        "description": "Someone committed API keys to the public repo. It wasn't you, but you're fixing it.",
        "effects": {"stress": 20, "energy": -15},
    },
    {
        "id": "event-13",
        "title": "Unexpected Bonus",
        "description": "Company had a great quarter. Everyone gets a bonus!",
        "effects": {"money": 1000, "stress": -10},
    },
    {
        "id": "event-14",
        "title": "Recruiter Spam Wave",
        "description": "Your inbox is flooded with recruiters. At least they found you.",
        "effects": {"reputation": 2, "stress": 5},
    },
    {
        "id": "event-15",
        "title": "Perfect Code Review",
        "description": "Your PR had zero comments. Clean code feels good.",
        "effects": {"coding": 2, "stress": -5, "reputation": 2},
    },
]

# ==================== SENIOR (level 3+) ====================
SENIOR_EVENTS: list[dict] = [
    {
        "id": "event-6",
        "title": "Junior Dev Needs Help",
        "description": "A junior developer is stuck. You spend time mentoring them.",
        "effects": {"reputation": 2, "energy": -10},
    },
    {
        "id": "event-10",
        "title": "Mentor Recognition",
        "description": "The person you mentored got promoted. They thanked you publicly.",
        "effects": {"reputation": 5, "stress": -5},
    },
]

# ==================== ANYONE ====================
UNIVERSAL_EVENTS: list[dict] = [
    {
        "id": "event-8",
        "title": "Side Project Goes Viral",
        "description": "Your weekend project hit the front page of HackerNews!",
        "effects": {"reputation": 10, "stress": -10, "money": 200},
    },
    {
        "id": "event-11",
        "title": "Open Source Contribution Merged",
        "description": "Your PR to a major OSS project got merged!",
        "effects": {"coding": 3, "reputation": 5, "stress": -5},
    },
]

# Jobs that draw from the no-job pool
UNEMPLOYED_EVENT_JOB_IDS = frozenset({"unemployed", "script-kiddie"})
EMPLOYED_EVENT_MIN_LEVEL = 2
SENIOR_EVENT_MIN_LEVEL = 3
