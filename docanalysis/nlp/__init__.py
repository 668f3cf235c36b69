from docanalysis.nlp.classifier import DocumentClassifier
from docanalysis.nlp.entities import EntityExtractor
from docanalysis.nlp.keywords import KeywordRanker
from docanalysis.nlp.models import DocumentType, EntityBag, SentimentResult
from docanalysis.nlp.sentiment import SentimentScorer
from docanalysis.nlp.summarizer import Summarizer
from docanalysis.nlp.tags import TagGenerator

__all__ = [
    "DocumentClassifier",
    "DocumentType",
    "EntityBag",
    "EntityExtractor",
    "KeywordRanker",
    "SentimentResult",
    "SentimentScorer",
    "Summarizer",
    "TagGenerator",
]
