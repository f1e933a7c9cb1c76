"""
Test suite cho việc chấm điểm chất lượng kế hoạch khám bệnh.
"""

import pytest

from api.medical_plan.models import QualityLevel
from features.medical_plan.quality_scorer import calculate_plan_quality, level_for_score

DETAILED_NOTES = (
    "Kế hoạch khám sức khỏe định kỳ cho người cao tuổi tại khoa nội trú, "
    "ưu tiên theo dõi huyết áp."
)


class TestLevelForScore:
    """Test xếp loại theo điểm"""

    @pytest.mark.parametrize(
        "score,level",
        [
            (0, QualityLevel.POOR),
            (49, QualityLevel.POOR),
            (50, QualityLevel.FAIR),
            (69, QualityLevel.FAIR),
            (70, QualityLevel.GOOD),
            (84, QualityLevel.GOOD),
            (85, QualityLevel.EXCELLENT),
            (100, QualityLevel.EXCELLENT),
        ],
    )
    def test_boundaries(self, score, level):
        assert level_for_score(score) == level


class TestCalculatePlanQuality:
    """Test điểm, xếp loại và khuyến nghị"""

    def test_reference_plan(self, make_appointment, today):
        # 100 - 3 (thông tin dịch vụ) - 8 (chuyên môn) + 5 (nhóm) + 5 (ghi chú)
        quality = calculate_plan_quality(
            "Khám định kỳ quý I/2024", [make_appointment()], DETAILED_NOTES, today
        )

        assert quality.score == 99
        assert quality.level == QualityLevel.EXCELLENT
        assert quality.recommendations == [
            "Kế hoạch có chất lượng xuất sắc, phù hợp để triển khai"
        ]

    def test_one_more_error_costs_fifteen_points(self, make_appointment, today):
        base = calculate_plan_quality(
            "Khám định kỳ quý I/2024", [make_appointment()], DETAILED_NOTES, today
        )
        worse = calculate_plan_quality(
            "Khám định kỳ quý I/2024", [make_appointment(time="25:00")], DETAILED_NOTES, today
        )

        assert base.score - worse.score == 15
        assert worse.score == 84
        assert worse.level == QualityLevel.GOOD
        # Mức good không có dòng tổng kết
        assert worse.recommendations == [
            "Cuộc hẹn 1: Giờ hẹn phải có định dạng HH:MM (VD: 09:30)"
        ]

    def test_empty_plan(self, today):
        quality = calculate_plan_quality("", [], today=today)

        # 100 - 15 (tên) - 3 (từ khóa) - 15 (không có cuộc hẹn)
        assert quality.score == 67
        assert quality.level == QualityLevel.FAIR
        assert quality.recommendations == [
            "Kế hoạch có thể cải thiện thêm để đạt chất lượng tốt hơn",
            "Tên kế hoạch khám bệnh là bắt buộc theo quy trình y tế",
            "Kế hoạch y tế phải có ít nhất một cuộc hẹn hợp lệ",
        ]

    def test_score_is_clamped_at_zero(self, make_appointment, today):
        appointments = [
            make_appointment(type="", provider="", date="", time="", priority="x")
            for _ in range(5)
        ]
        quality = calculate_plan_quality("", appointments, today=today)

        assert quality.score == 0
        assert quality.level == QualityLevel.POOR
        assert quality.recommendations[0] == (
            "Kế hoạch cần cải thiện đáng kể về chất lượng và tính khả thi"
        )

    def test_priority_spread_bonus(self, make_appointment, today):
        def plan(priorities):
            appointments = [
                make_appointment(time=time, priority=priority)
                for time, priority in zip(["09:00", "10:00", "14:00"], priorities)
            ]
            return calculate_plan_quality("Khám định kỳ quý I/2024", appointments, today=today)

        # 100 - 3 * 11 - 3 (tần suất) + 5 (nhóm)
        same = plan(["medium", "medium", "medium"])
        spread = plan(["low", "medium", "high"])

        assert same.score == 69
        assert spread.score == 79
        assert spread.level == QualityLevel.GOOD

    def test_category_bonus_is_capped(self, make_appointment, today):
        appointments = [
            make_appointment(type="Khám tổng quát", provider="Bác sĩ An", time="08:00"),
            make_appointment(type="Khám mắt", provider="Bác sĩ Bình", time="09:00"),
            make_appointment(
                type="Xét nghiệm máu tổng quát", provider="KTV. Phòng xét nghiệm", time="10:00"
            ),
            make_appointment(
                type="Vật lý trị liệu", provider="KTV. Chi - kỹ thuật viên", time="14:00"
            ),
            make_appointment(type="Tư vấn dinh dưỡng", provider="Chuyên viên Dung", time="15:00"),
        ]
        quality = calculate_plan_quality("Khám", appointments, today=today)

        # 100 - 8 (tên ngắn) - 5 * 3 (thông tin dịch vụ) + 20 (tối đa cho 5 nhóm)
        assert quality.score == 97

    def test_short_notes_get_no_bonus(self, make_appointment, today):
        quality = calculate_plan_quality(
            "Khám định kỳ quý I/2024", [make_appointment()], "Ghi chú ngắn", today
        )

        assert quality.score == 94

    def test_repeated_calls_are_identical(self, make_appointment, today):
        appointments = [make_appointment(), make_appointment(date="2024-03-10")]

        first = calculate_plan_quality("Khám", appointments, DETAILED_NOTES, today)
        second = calculate_plan_quality("Khám", appointments, DETAILED_NOTES, today)

        assert first == second
