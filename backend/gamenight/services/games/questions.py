"""Trivia catalog.

Questions are plain dicts: ``q`` prompt, ``a`` correct answer, ``choices``.
"""

import random
from typing import List

TRIVIA_QUESTIONS = (
    {'q': "What year did the first iPhone launch?", 'a': "2007", 'choices': ("2005", "2007", "2009", "2010")},
    {'q': "Which planet is closest to the Sun?", 'a': "Mercury", 'choices': ("Venus", "Mercury", "Mars", "Earth")},
    {'q': "Who painted the Mona Lisa?", 'a': "Leonardo da Vinci", 'choices': ("Michelangelo", "Leonardo da Vinci", "Raphael", "Donatello")},
    {'q': "What is the capital of Australia?", 'a': "Canberra", 'choices': ("Sydney", "Melbourne", "Canberra", "Brisbane")},
    {'q': "How many hearts does an octopus have?", 'a': "3", 'choices': ("1", "2", "3", "4")},
    {'q': "What is the smallest country in the world?", 'a': "Vatican City", 'choices': ("Monaco", "Vatican City", "San Marino", "Liechtenstein")},
    {'q': "Which element has the chemical symbol 'Au'?", 'a': "Gold", 'choices': ("Silver", "Gold", "Copper", "Aluminum")},
    {'q': "How many strings does a standard guitar have?", 'a': "6", 'choices': ("4", "5", "6", "7")},
    {'q': "What is the tallest mountain in the world?", 'a': "Mount Everest", 'choices': ("K2", "Mount Everest", "Kilimanjaro", "Denali")},
    {'q': "What year did World War II end?", 'a': "1945", 'choices': ("1943", "1944", "1945", "1946")},
)


def draw(count: int = 5) -> List[dict]:
    """Draw ``count`` random questions without replacement.

    Returns fresh dicts so callers may keep them on a room without touching
    the catalog.
    """
    count = max(0, min(count, len(TRIVIA_QUESTIONS)))
    return [
        {'q': item['q'], 'a': item['a'], 'choices': list(item['choices'])}
        for item in random.sample(TRIVIA_QUESTIONS, count)
    ]
