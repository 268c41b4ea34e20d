"""API 라우터 모음"""
