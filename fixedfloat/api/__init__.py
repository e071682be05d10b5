"""
FixedFloat API Integration

Request signing and request body shaping for the FixedFloat v2 API:
- HMAC-SHA256 body signing and the signed POST primitive
- Request models for each endpoint
"""
