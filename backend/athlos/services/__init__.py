"""
Services Layer

Pure draw logic that:
- Accepts plain participant records
- Returns plain match records
- Does NOT touch the database or HTTP request/response objects
- Does NOT mutate its inputs
"""
