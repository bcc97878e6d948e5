"""Blog API: posts, search, likes and newsletter signups served by FastAPI.

Everything lives under ``blog_api.app``.
"""
