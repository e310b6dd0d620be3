from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class MovieQuery:
    """
    A movie name that is safe to send to the metadata provider.

    Build it with `movie_plots.services.movie_plots.parse_movie_query`, which
    trims, length-checks and strips `<`/`>` from raw user input.
    """

    name: str


@dataclass(frozen=True)
class MovieInfo:
    title: str
    plot: str

    @classmethod
    def from_omdb(cls, payload: Mapping[str, Any]) -> "MovieInfo":
        """Rename OMDB's capitalized `Title`/`Plot` fields; values are kept verbatim."""
        title = payload.get("Title")
        plot = payload.get("Plot")
        if not isinstance(title, str) or not isinstance(plot, str):
            raise ValueError("OMDB payload is missing Title or Plot.")
        return cls(title=title, plot=plot)


@dataclass(frozen=True)
class Translation:
    translated_text: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Translation":
        value = payload.get("translatedText")
        if not isinstance(value, str):
            raise ValueError("Translation payload is missing translatedText.")
        return cls(translated_text=value)


@dataclass(frozen=True)
class MoviePlot:
    """Final pipeline result: the movie title and its translated plot."""

    title: str
    plot: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "plot": self.plot}
