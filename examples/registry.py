"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    description: str


EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "basic/00_weighted_choice.py",
        "tags": ["basic", "sampling"],
        "description": "Weighted choice with and without replacement.",
    },
    {
        "path": "basic/01_descriptive_statistics.py",
        "tags": ["basic", "stats"],
        "description": "Moments, covariance/correlation matrices and NaN sentinels.",
    },
    {
        "path": "basic/02_distribution_draws.py",
        "tags": ["basic", "sampling"],
        "description": "Normal, binomial and integer draws from a seeded source.",
    },
]
