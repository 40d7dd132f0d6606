"""
String helpers for naming conventions.

Controllers, models, slugs and relationship names are all related to each
other by convention (ArticlesController -> Article -> "articles"), so these
helpers are what the wildcard resolver and Ancestry use to guess one from
another. Pluralization is delegated to the inflect library; camel cased words
are only inflected on their last word.
"""

import re
from typing import Tuple, Union

import inflect

_engine = inflect.engine()

# Splits "superSlide" into ("super", "Slide")
_LAST_WORD = re.compile(r"^(.*?)([A-Z]?[^A-Z]*)$")

# Word boundaries in StudlyCase, ex: "SuperSlides" -> "Super", "Slides"
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

CONTROLLER_SUFFIX = "Controller"


def _split_last_word(word: str) -> Tuple[str, str]:
    match = _LAST_WORD.match(word)
    return match.group(1), match.group(2)


def _match_case(original: str, inflected: str) -> str:
    if original[:1].isupper():
        return inflected[:1].upper() + inflected[1:]
    return inflected


def plural(word: str) -> str:
    """
    Pluralize a word, respecting camel case.

    Args:
        word: Singular word, ex: "superSlide".

    Returns:
        Plural form, ex: "superSlides".
    """
    prefix, last = _split_last_word(word)
    if not last:
        return word
    return prefix + _match_case(last, _engine.plural_noun(last.lower()))


def singular(word: str) -> str:
    """
    Singularize a word, respecting camel case.

    Words that are already singular are returned unchanged.
    """
    prefix, last = _split_last_word(word)
    if not last:
        return word
    inflected = _engine.singular_noun(last.lower())
    if not inflected:
        return word
    return prefix + _match_case(last, inflected)


def lcfirst(word: str) -> str:
    """Lowercase the first character, ex: "SuperSlide" -> "superSlide"."""
    return word[:1].lower() + word[1:]


def class_basename(cls: Union[type, str]) -> str:
    """
    Get just the class name from a class or a dotted path.

    Args:
        cls: A class or a string like "app.models.Article".

    Returns:
        The simple name, ex: "Article".
    """
    if isinstance(cls, type):
        return cls.__name__
    return str(cls).rsplit(".", 1)[-1]


def studly(slug: str) -> str:
    """Convert a slug to StudlyCase, ex: "super-slides" -> "SuperSlides"."""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-_\s]+", slug) if part)


def slugify_class(cls: Union[type, str]) -> str:
    """
    Convert a controller class to the slug it is routed under.

    Ex: SuperSlidesController -> "super-slides"
    """
    name = class_basename(cls)
    if name.endswith(CONTROLLER_SUFFIX) and name != CONTROLLER_SUFFIX:
        name = name[: -len(CONTROLLER_SUFFIX)]
    return "-".join(part.lower() for part in _WORD_BOUNDARY.split(name))
