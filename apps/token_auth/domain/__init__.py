"""Domain Layer.

순수 도메인 모델입니다. 외부 라이브러리에 의존하지 않습니다.
"""
