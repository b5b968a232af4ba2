"""
アルケイン・チェッカー
"""
