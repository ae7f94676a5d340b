from enum import Enum


class CourseTypeEnum(str, Enum):
    LIVE = "live"
    RECORDED = "recorded"
    TEST_SERIES = "test-series"
