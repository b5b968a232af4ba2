"""
表示側向けのHTTP API
"""
