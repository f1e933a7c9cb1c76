from api.medical_plan.models import ServiceCategory, ServiceDefinition

MEDICAL_SERVICES = (
    ServiceDefinition(
        name="Khám tổng quát",
        frequency="6 tháng",
        duration="30 phút",
        preparation="Nhịn ăn 8 tiếng nếu có xét nghiệm",
        category=ServiceCategory.GENERAL_CHECKUP,
        requirements=("Bác sĩ đa khoa",),
    ),
    ServiceDefinition(
        name="Khám định kỳ",
        frequency="3 tháng",
        duration="20 phút",
        preparation="Mang theo thuốc đang dùng",
        category=ServiceCategory.GENERAL_CHECKUP,
        requirements=("Bác sĩ gia đình",),
    ),
    ServiceDefinition(
        name="Khám chuyên khoa tim mạch",
        frequency="6 tháng",
        duration="45 phút",
        preparation="Mang theo kết quả ECG gần nhất",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ tim mạch", "Máy siêu âm tim"),
    ),
    ServiceDefinition(
        name="Khám chuyên khoa tiêu hóa",
        frequency="6 tháng",
        duration="30 phút",
        preparation="Nhịn ăn 12 tiếng nếu cần nội soi",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ tiêu hóa",),
    ),
    ServiceDefinition(
        name="Khám chuyên khoa thần kinh",
        frequency="6 tháng",
        duration="40 phút",
        preparation="Chuẩn bị danh sách triệu chứng",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ thần kinh",),
    ),
    ServiceDefinition(
        name="Khám chuyên khoa cơ xương khớp",
        frequency="4 tháng",
        duration="35 phút",
        preparation="Mang theo X-quang cũ",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ cơ xương khớp",),
    ),
    ServiceDefinition(
        name="Khám mắt",
        frequency="12 tháng",
        duration="25 phút",
        preparation="Không cần chuẩn bị đặc biệt",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ nhãn khoa",),
    ),
    ServiceDefinition(
        name="Khám răng hàm mặt",
        frequency="6 tháng",
        duration="30 phút",
        preparation="Đánh răng sạch sẽ trước khám",
        category=ServiceCategory.SPECIALIST,
        requirements=("Bác sĩ nha khoa",),
    ),
    ServiceDefinition(
        name="Xét nghiệm máu tổng quát",
        frequency="3 tháng",
        duration="15 phút",
        preparation="Nhịn ăn 8-12 tiếng",
        category=ServiceCategory.LAB_TEST,
        requirements=("Phòng xét nghiệm",),
    ),
    ServiceDefinition(
        name="Xét nghiệm sinh hóa",
        frequency="3 tháng",
        duration="15 phút",
        preparation="Nhịn ăn 12 tiếng",
        category=ServiceCategory.LAB_TEST,
        requirements=("Phòng xét nghiệm",),
    ),
    ServiceDefinition(
        name="Xét nghiệm nước tiểu",
        frequency="3 tháng",
        duration="10 phút",
        preparation="Lấy nước tiểu đầu tiên buổi sáng",
        category=ServiceCategory.LAB_TEST,
        requirements=("Phòng xét nghiệm",),
    ),
    ServiceDefinition(
        name="Siêu âm bụng tổng quát",
        frequency="12 tháng",
        duration="30 phút",
        preparation="Nhịn ăn 8 tiếng, uống nhiều nước",
        category=ServiceCategory.IMAGING,
        requirements=("Máy siêu âm", "Bác sĩ chẩn đoán hình ảnh"),
    ),
    ServiceDefinition(
        name="Siêu âm tim",
        frequency="12 tháng",
        duration="45 phút",
        preparation="Không cần chuẩn bị đặc biệt",
        category=ServiceCategory.IMAGING,
        requirements=("Máy siêu âm tim", "Bác sĩ tim mạch"),
    ),
    ServiceDefinition(
        name="Chụp X-quang ngực",
        frequency="12 tháng",
        duration="15 phút",
        preparation="Cởi áo, trang sức vùng ngực",
        category=ServiceCategory.IMAGING,
        requirements=("Máy X-quang", "Kỹ thuật viên X-quang"),
    ),
    ServiceDefinition(
        name="Chụp X-quang cột sống",
        frequency="18 tháng",
        duration="20 phút",
        preparation="Cởi áo, trang sức",
        category=ServiceCategory.IMAGING,
        requirements=("Máy X-quang", "Kỹ thuật viên X-quang"),
    ),
    ServiceDefinition(
        name="CT Scan",
        frequency="24 tháng",
        duration="30 phút",
        preparation="Nhịn ăn 4 tiếng, uống thuốc cản quang",
        category=ServiceCategory.IMAGING,
        requirements=("Máy CT", "Bác sĩ chẩn đoán hình ảnh"),
    ),
    ServiceDefinition(
        name="MRI",
        frequency="24 tháng",
        duration="60 phút",
        preparation="Cởi hết đồ kim loại",
        category=ServiceCategory.IMAGING,
        requirements=("Máy MRI", "Bác sĩ chẩn đoán hình ảnh"),
    ),
    ServiceDefinition(
        name="Vật lý trị liệu",
        frequency="1 tuần",
        duration="45 phút",
        preparation="Mặc quần áo thoải mái",
        category=ServiceCategory.REHABILITATION,
        requirements=("Kỹ thuật viên vật lý trị liệu",),
    ),
    ServiceDefinition(
        name="Tư vấn dinh dưỡng",
        frequency="6 tháng",
        duration="30 phút",
        preparation="Ghi chép chế độ ăn 3 ngày",
        category=ServiceCategory.COUNSELING,
        requirements=("Chuyên viên dinh dưỡng",),
    ),
    ServiceDefinition(
        name="Tư vấn tâm lý",
        frequency="6 tháng",
        duration="45 phút",
        preparation="Chuẩn bị tinh thần thoải mái",
        category=ServiceCategory.COUNSELING,
        requirements=("Bác sĩ tâm lý",),
    ),
    ServiceDefinition(
        name="Kiểm tra huyết áp",
        frequency="1 tuần",
        duration="10 phút",
        preparation="Nghỉ ngơi 5 phút trước đo",
        category=ServiceCategory.MONITORING,
        requirements=("Máy đo huyết áp",),
    ),
    ServiceDefinition(
        name="Kiểm tra đường huyết",
        frequency="1 tuần",
        duration="10 phút",
        preparation="Nhịn ăn 8 tiếng nếu đo đói",
        category=ServiceCategory.MONITORING,
        requirements=("Máy đo đường huyết",),
    ),
    ServiceDefinition(
        name="Theo dõi cân nặng",
        frequency="1 tuần",
        duration="5 phút",
        preparation="Cân buổi sáng, bụng đói",
        category=ServiceCategory.MONITORING,
        requirements=("Cân điện tử",),
    ),
)

SERVICES_BY_NAME = {service.name: service for service in MEDICAL_SERVICES}

# Khung giờ làm việc chuẩn y tế, cận trên và cận dưới đều được tính
WORKING_HOURS = {
    "weekdays": (("07:00", "11:30"), ("13:30", "17:00")),
    "saturday": (("07:00", "11:30"),),
    "sunday": (),
}

# Chỉ số ngày theo date.weekday(): 0 là thứ 2
SCHEDULE_BY_WEEKDAY = {
    0: "weekdays",
    1: "weekdays",
    2: "weekdays",
    3: "weekdays",
    4: "weekdays",
    5: "saturday",
    6: "sunday",
}

EMERGENCY_AVAILABILITY = "24/7"

MEDICAL_KEYWORDS = ["khám", "xét nghiệm", "theo dõi", "điều trị", "phục hồi", "tư vấn"]

PROVIDER_TITLE_PATTERN = r"^(BS\.|Bác sĩ|ThS\.|TS\.|GS\.|PGS\.|KTV\.|Chuyên viên)"

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
