"""Port interface for the external text-completion service."""

from abc import ABC, abstractmethod


class CompletionClientPort(ABC):
    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the raw completion text.

        Implementations raise ClassificationError subclasses for quota,
        timeout, service and empty-response failures.
        """
        ...
