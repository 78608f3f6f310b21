"""Roadmap index: which phase modules make up each roadmap, in order."""

ROADMAPS = [
    {
        "slug": "dsa",
        "title": "Data Structures & Algorithms",
        "emoji": "🧠",
        "color": "#e44d26",
        "description": "Big-O, recursion and interview-level problem solving.",
        "tags": ["DSA", "Interview", "Problem Solving"],
        "modules": ["dsa_phase1"],
    },
    {
        "slug": "javascript",
        "title": "JavaScript",
        "emoji": "⚡",
        "color": "#f7df1e",
        "description": "From variables to closures and iterators.",
        "tags": ["Frontend", "Backend", "Web"],
        "modules": [
            {"module": "javascript_phase1", "supplements": ["javascript_phase1b"]},
            "javascript_phase2",
        ],
    },
    {
        "slug": "python",
        "title": "Python",
        "emoji": "🐍",
        "color": "#3776ab",
        "description": "Data structures, OOP, decorators and real-world projects.",
        "tags": ["Backend", "Data Science", "AI"],
        "comingSoon": True,
    },
]
