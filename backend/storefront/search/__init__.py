from storefront.search.ranker import FuzzyRanker, WeightedField, field_similarity, text_similarity

__all__ = ["FuzzyRanker", "WeightedField", "field_similarity", "text_similarity"]
