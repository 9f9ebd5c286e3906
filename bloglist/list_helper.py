"""
Aggregations over in-memory lists of blogs.

Each helper takes a sequence of mappings with `title`, `author` and `likes`
keys (ORM rows work too) and never mutates it. Ties go to whichever blog or
author comes first in the input; an empty input gives an empty dict.
"""
from collections import defaultdict
from typing import Any, Dict, Iterable, Sequence


def _field(blog, name: str, default=None):
    if isinstance(blog, dict):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog) -> int:
    return _field(blog, 'likes') or 0


def _group_by_author(blogs: Iterable) -> Dict[Any, list]:
    groups = defaultdict(list)
    for blog in blogs:
        groups[_field(blog, 'author')].append(blog)
    return groups


def dummy(blogs) -> int:
    return 1


def total_likes(blogs: Sequence) -> int:
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence) -> dict:
    if not blogs:
        return {}
    # max() keeps the first of equal elements
    blog = max(blogs, key=_likes)
    return {
        'title': _field(blog, 'title'),
        'author': _field(blog, 'author'),
        'likes': _likes(blog),
    }


def most_blogs(blogs: Sequence) -> dict:
    if not blogs:
        return {}
    counts = [
        {'author': author, 'blogs': len(group)}
        for author, group in _group_by_author(blogs).items()
    ]
    return max(counts, key=lambda entry: entry['blogs'])


def most_likes(blogs: Sequence) -> dict:
    if not blogs:
        return {}
    sums = [
        {'author': author, 'likes': sum(_likes(blog) for blog in group)}
        for author, group in _group_by_author(blogs).items()
    ]
    return max(sums, key=lambda entry: entry['likes'])
