"""
Bloc quiz — questions à choix unique, score calculé côté client.

Le score passe par un <script> inline : la plupart des clients mail le
suppriment, le bloc n'est donc interactif que dans l'aperçu.
"""
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from ..core.schemas import CamelModel
from .base import BaseBlock, BlockContent, only_records


class QuizQuestion(CamelModel):
    question: str = ""
    image: str = ""
    options: List[str] = Field(default_factory=list)
    correct_answer: Optional[str] = None  # index ("1") ou texte de l'option

    @field_validator("options", mode="before")
    @classmethod
    def option_texts(cls, value: Any) -> Any:
        # Options saisies en chaînes ou en {id, text}
        if not isinstance(value, list):
            return value
        return [
            str(item.get("text") or "") if isinstance(item, dict) else str(item)
            for item in value
            if item is not None
        ]

    def correct_index(self) -> Optional[int]:
        """Index de la bonne réponse, None si absente ou introuvable."""
        if self.correct_answer is None:
            return None
        if self.correct_answer in self.options:
            return self.options.index(self.correct_answer)
        # isdecimal : "²" est un chiffre pour isdigit mais pas pour int()
        if self.correct_answer.isdecimal() and int(self.correct_answer) < len(self.options):
            return int(self.correct_answer)
        return None


class QuizContent(BlockContent):
    title: str = "Quiz"
    questions: List[QuizQuestion] = Field(default_factory=list)
    submit_text: str = "Check my answers"

    @field_validator("questions", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class QuizBlock(BaseBlock):
    type: Literal["quiz"] = "quiz"
    content: QuizContent = Field(default_factory=QuizContent)
