"""Gemini Rewrite Service - article rewrites via Google Gemini."""

import logging
from typing import Iterable, Sequence

from vocab_reader.core import ReaderError
from vocab_reader.services.generative import GeminiTextClient
from vocab_reader.services.rewrite.rewrite_service import RewriteResult, RewriteService, unique_target_words
from vocab_reader.services.text_processing import normalize_word

logger = logging.getLogger(__name__)


class GeminiRewriteService(RewriteService):
    """
    Rewrite service using the Gemini text client.

    The model is trusted to honor the bracket contract; the output is not
    checked word by word. Only transport and payload failures are errors.
    """

    MAX_OUTPUT_TOKENS = 2000
    TEMPERATURE = 0.7

    PROMPT_TEMPLATE = """Rewrite the following article incorporating these {num_words} words: {selected_words}
Requirements:
1. Maintain the original meaning of the article
2. Use each target word exactly once
3. Ensure the usage is natural and contextually appropriate
4. Keep the difficulty level similar to the original article
5. For each used target word, wrap it in square brackets like [word]
6. If a target word already exists in the original article, keep it in its original context and just wrap it in square brackets [] - do not rewrite or add it again
Original article: {base_article}
Important:
- Make sure to wrap each used target word in square brackets, e.g., [target_word]
- If you find a target word already present in the original text, simply add square brackets around it rather than rewriting that part
"""

    def __init__(self, client: GeminiTextClient):
        self._client = client

    def build_prompt(self, original_text: str, target_words: Sequence[str]) -> str:
        """Build the rewrite instruction for already de-duplicated target words."""
        return self.PROMPT_TEMPLATE.format(
            num_words=len(target_words),
            selected_words=", ".join(target_words),
            base_article=original_text,
        )

    def rewrite(self, original_text: str, target_words: Iterable[str]) -> RewriteResult:
        words = unique_target_words(target_words)
        if not words:
            return RewriteResult(success=True, rewritten_text=original_text)

        try:
            self._client.require_api_key()
            prompt = self.build_prompt(original_text, words)
            logger.info(
                "Rewriting article (%d chars) with %d target words: %s",
                len(original_text),
                len(words),
                ", ".join(words),
            )
            text = self._client.generate(
                prompt,
                max_output_tokens=self.MAX_OUTPUT_TOKENS,
                temperature=self.TEMPERATURE,
            )
        except ReaderError as exc:
            logger.warning("Article rewrite failed (%s): %s", exc.kind.value, exc.detail)
            return RewriteResult(success=False, error=exc, model=self._client.model_name)

        result = RewriteResult(success=True, rewritten_text=text, model=self._client.model_name)
        marked = result.marked_words
        logger.info("Rewrite complete: %d chars, %d bracket markers", len(text), len(marked))

        marked_keys = {normalize_word(word) for word in marked}
        missing = [word for word in words if normalize_word(word) not in marked_keys]
        if missing:
            logger.warning("Rewrite left %d target words unmarked: %s", len(missing), ", ".join(missing))
        return result
