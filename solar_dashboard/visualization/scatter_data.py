"""
천정각-발전량 산점도 데이터와 점 표시 규칙
"""

SCATTER_PLOT_DATA = {
    'zenith_angles': [
        10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95,
        100, 105, 110, 115, 120,
    ],
    'power_values': [
        2800, 2600, 2400, 2200, 2000, 1800, 1600, 1400, 1200, 1000, 800, 600, 400,
        200, 100, 50, 0, -100, -200, -300, -500, -700, -1000,
    ],
    'radiation_values': [
        800, 750, 700, 650, 600, 550, 500, 450, 400, 350, 300, 250, 200, 150, 100,
        80, 60, 40, 30, 20, 10, 5, 0,
    ],
}


def point_color(radiation_value: float) -> str:
    """일사량 구간별 산점도 색상"""
    if radiation_value >= 600:
        return '#FDE047'  # 높음
    if radiation_value >= 400:
        return '#FB7185'  # 보통
    if radiation_value >= 200:
        return '#A78BFA'  # 낮음
    return '#1E40AF'


def point_size(radiation_value: float) -> float:
    """일사량에 비례한 산점도 점 크기 (4~12)"""
    return max(4, min(12, radiation_value / 50))
