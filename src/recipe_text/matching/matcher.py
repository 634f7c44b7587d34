"""Fuzzy matching of ingredient names inside free-form step text."""

import dataclasses
import logging
import re
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from recipe_text.ingredients.normalization import normalize_text, stem_text
from recipe_text.ingredients.parsing import extract_amount_label
from recipe_text.matching.distance import normalized_levenshtein
from recipe_text.matching.models import (
    IngredientToken,
    MatchInput,
    SequenceToken,
    TextToken,
)

logger = logging.getLogger(__name__)

MAX_NGRAM_SIZE = 4
DEFAULT_THRESHOLD = 0.42
EXACT_MATCH_FACTOR = 0.6

# Letters and digits, with internal apostrophes or hyphens ("mother's", "pseudo-word").
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’-][^\W_]+)*")


class _Segment(NamedTuple):
    value: str
    is_word: bool


class _WordToken(NamedTuple):
    value: str
    segment_index: int


@dataclasses.dataclass(frozen=True)
class PreparedIngredient:
    original: str
    item: str
    normalized: str
    stemmed: str
    amount: Optional[str]

    @property
    def word_count(self) -> int:
        return len(self.normalized.split())


@dataclasses.dataclass(frozen=True)
class IngredientIndex:
    """Ingredients prepared once for repeated matching against many steps."""

    ingredients: Tuple[PreparedIngredient, ...]
    threshold: float = DEFAULT_THRESHOLD

    def __len__(self) -> int:
        return len(self.ingredients)


@dataclasses.dataclass(frozen=True)
class _Candidate:
    ingredient: PreparedIngredient
    start_word: int
    end_word: int
    score: float

    @property
    def span(self) -> int:
        return self.end_word - self.start_word

    def is_better_than(self, other: "_Candidate") -> bool:
        if self.span != other.span:
            return self.span > other.span
        return self.score < other.score


def prepare_ingredient(ingredient: Any) -> PreparedIngredient:
    ingredient = MatchInput.coerce(ingredient)
    return PreparedIngredient(
        original=ingredient.original,
        item=ingredient.item,
        normalized=normalize_text(ingredient.item),
        stemmed=stem_text(ingredient.item),
        amount=extract_amount_label(ingredient.original),
    )


def prepare_index(
    ingredients: Iterable[Any], threshold: float = DEFAULT_THRESHOLD
) -> IngredientIndex:
    """Build an IngredientIndex from MatchInput records, mappings or pairs.

    Ingredients whose name normalizes to nothing are left out.
    """
    prepared = tuple(
        ingredient
        for ingredient in (prepare_ingredient(value) for value in ingredients)
        if ingredient.normalized
    )
    return IngredientIndex(ingredients=prepared, threshold=threshold)


def _split_segments(text: str) -> List[_Segment]:
    segments = []
    cursor = 0
    for match in WORD_PATTERN.finditer(text):
        if match.start() > cursor:
            segments.append(_Segment(text[cursor : match.start()], False))
        segments.append(_Segment(match.group(0), True))
        cursor = match.end()
    if cursor < len(text):
        segments.append(_Segment(text[cursor:], False))
    return segments


def _collect_words(segments: List[_Segment]) -> List[_WordToken]:
    return [
        _WordToken(segment.value, index)
        for index, segment in enumerate(segments)
        if segment.is_word
    ]


class _PhraseScorer:
    """Scores word windows of one text against ingredients, caching phrase forms."""

    def __init__(
        self, words: List[_WordToken], ingredients: Tuple[PreparedIngredient, ...]
    ):
        self.words = words
        self._forms: Dict[Tuple[int, int], Tuple[str, str]] = {}
        self.verbatim_spans = self._find_verbatim_spans(
            {ingredient.normalized for ingredient in ingredients}
        )

    def _find_verbatim_spans(self, names: Set[str]) -> List[Tuple[int, int]]:
        """Word ranges spelling an ingredient name exactly, up to case and diacritics."""
        spans = []
        for start in range(len(self.words)):
            for end in range(start, min(start + MAX_NGRAM_SIZE, len(self.words))):
                if self.forms(start, end)[0] in names:
                    spans.append((start, end))
        return spans

    def forms(self, start: int, end: int) -> Tuple[str, str]:
        key = (start, end)
        if key not in self._forms:
            phrase = " ".join(word.value for word in self.words[start : end + 1])
            self._forms[key] = (normalize_text(phrase), stem_text(phrase))
        return self._forms[key]

    def score(
        self, start: int, end: int, ingredient: PreparedIngredient
    ) -> Optional[float]:
        """Score of the window against ``ingredient``; None when the window is skipped."""
        normalized, stemmed = self.forms(start, end)
        if not normalized or _is_amount_like_phrase(normalized, ingredient):
            return None

        combined = min(
            normalized_levenshtein(normalized, ingredient.normalized),
            normalized_levenshtein(stemmed, ingredient.stemmed),
        )
        if self.is_exact(start, end, ingredient):
            return combined * EXACT_MATCH_FACTOR
        return combined

    def is_exact(self, start: int, end: int, ingredient: PreparedIngredient) -> bool:
        normalized, stemmed = self.forms(start, end)
        return normalized == ingredient.normalized or stemmed == ingredient.stemmed

    def overlaps_verbatim(self, start: int, end: int) -> bool:
        return any(
            span_start <= end and start <= span_end
            for span_start, span_end in self.verbatim_spans
        )

    def has_loose_edge(
        self, start: int, end: int, ingredient: PreparedIngredient, score: float
    ) -> bool:
        """True if dropping the first or last word scores strictly better."""
        if start == end:
            return False
        for sub_start, sub_end in ((start + 1, end), (start, end - 1)):
            sub_score = self.score(sub_start, sub_end, ingredient)
            if sub_score is not None and sub_score < score:
                return True
        return False


def _is_amount_like_phrase(phrase: str, ingredient: PreparedIngredient) -> bool:
    """A window longer than the ingredient name that carries a number."""
    phrase_words = phrase.split()
    if len(phrase_words) <= ingredient.word_count:
        return False
    return any(char.isdigit() for char in phrase)


def _best_match_at(
    scorer: _PhraseScorer, start_word: int, index: IngredientIndex
) -> Optional[_Candidate]:
    max_size = min(MAX_NGRAM_SIZE, len(scorer.words) - start_word)
    best = None

    for size in range(max_size, 0, -1):
        end_word = start_word + size - 1
        for ingredient in index.ingredients:
            score = scorer.score(start_word, end_word, ingredient)
            if score is None or score > index.threshold:
                continue
            if scorer.has_loose_edge(start_word, end_word, ingredient, score):
                continue
            # Only an exact name may cover a verbatim mention of another ingredient.
            if not scorer.is_exact(
                start_word, end_word, ingredient
            ) and scorer.overlaps_verbatim(start_word, end_word):
                continue

            candidate = _Candidate(ingredient, start_word, end_word, score)
            if best is None or candidate.is_better_than(best):
                best = candidate

    return best


def _find_matches(words: List[_WordToken], index: IngredientIndex) -> List[_Candidate]:
    scorer = _PhraseScorer(words, index.ingredients)
    matches = []

    word_index = 0
    while word_index < len(words):
        best = _best_match_at(scorer, word_index, index)
        if best is None:
            word_index += 1
            continue

        logger.debug(
            "Matched %r to ingredient %r (score %.3f)",
            " ".join(word.value for word in words[best.start_word : best.end_word + 1]),
            best.ingredient.item,
            best.score,
        )
        matches.append(best)
        word_index = best.end_word + 1

    return matches


def _build_sequence_tokens(
    segments: List[_Segment], words: List[_WordToken], matches: List[_Candidate]
) -> List[SequenceToken]:
    if not matches:
        return [TextToken("".join(segment.value for segment in segments))]

    sequence: List[SequenceToken] = []
    cursor = 0

    for match in matches:
        segment_start = words[match.start_word].segment_index
        segment_end = words[match.end_word].segment_index

        text_part = "".join(segment.value for segment in segments[cursor:segment_start])
        if text_part:
            sequence.append(TextToken(text_part))

        sequence.append(
            IngredientToken(
                value="".join(
                    segment.value for segment in segments[segment_start : segment_end + 1]
                ),
                ingredient=match.ingredient.item,
                amount=match.ingredient.amount,
                original=match.ingredient.original,
            )
        )
        cursor = segment_end + 1

    suffix = "".join(segment.value for segment in segments[cursor:])
    if suffix:
        sequence.append(TextToken(suffix))

    return sequence


def match_with_index(index: IngredientIndex, text: str) -> List[SequenceToken]:
    """Split ``text`` into plain text and ingredient mentions.

    Matching is greedy from the left: at each word the longest accepted
    window wins, ties go to the lower score, and the search resumes after
    the matched words. Concatenating the token values gives back ``text``.

    Args:
        index: Prepared ingredients, see prepare_index.
        text: Free-form text, typically a single recipe step.

    Returns:
        Ordered list of TextToken and IngredientToken. Empty for empty text,
        a single TextToken when there is nothing to match.
    """
    if not text:
        return []

    segments = _split_segments(text)
    words = _collect_words(segments)
    if not words or len(index) == 0:
        return [TextToken(text)]

    matches = _find_matches(words, index)
    return _build_sequence_tokens(segments, words, matches)


def match_ingredients_sequence(
    ingredients: Iterable[Any], text: str, threshold: float = DEFAULT_THRESHOLD
) -> List[SequenceToken]:
    """Find ingredient mentions in ``text``.

    Examples:
        >>> tokens = match_ingredients_sequence(
        ...     [MatchInput("2 cloves garlic", "garlic")], "Add garlic."
        ... )
        >>> [token.value for token in tokens]
        ['Add ', 'garlic', '.']
    """
    if not text:
        return []
    return match_with_index(prepare_index(ingredients, threshold), text)


def highlighted_ingredients(
    ingredients: Iterable[Any], tokens: Iterable[SequenceToken]
) -> List[Any]:
    """Ingredient records mentioned by ``tokens``, in first-mention order.

    ``ingredients`` are records with a ``raw`` attribute (see Ingredient);
    tokens are joined to them through ``IngredientToken.original``.
    """
    by_raw = {}
    for ingredient in ingredients:
        by_raw.setdefault(ingredient.raw, ingredient)

    found = []
    seen = set()
    for token in tokens:
        if not isinstance(token, IngredientToken) or token.original in seen:
            continue
        ingredient = by_raw.get(token.original)
        if ingredient is not None:
            seen.add(token.original)
            found.append(ingredient)
    return found


def tokens_to_dicts(tokens: Iterable[SequenceToken]) -> List[Dict[str, Any]]:
    return [token.to_dict() for token in tokens]
