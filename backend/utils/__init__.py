from .formatting import amount_to_words, format_indian_currency, to_money

__all__ = ['amount_to_words', 'format_indian_currency', 'to_money']
