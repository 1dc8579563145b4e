"""
차트 및 시각화 생성 모듈
"""
import matplotlib
matplotlib.use('Agg')  # 서버 환경에서 matplotlib 사용을 위한 백엔드 설정
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np
from io import BytesIO
from typing import List, Optional

from solar_dashboard.visualization.scatter_data import SCATTER_PLOT_DATA, point_color, point_size

plt.rcParams['axes.unicode_minus'] = False

class ChartGenerator:
    """차트 생성 클래스"""

    def __init__(self):
        # 색상 팔레트
        self.colors = {
            'primary': '#2196F3',
            'warning': '#F44336',
            'optimal': '#22C55E'
        }

        # 기본 스타일 설정
        sns.set_style("whitegrid")

    def generate_scatter_chart(
        self,
        zenith_angles: Optional[List[float]] = None,
        power_values: Optional[List[float]] = None,
        radiation_values: Optional[List[float]] = None,
        current_zenith: Optional[float] = None,
        current_power_kw: Optional[float] = None
    ) -> BytesIO:
        """천정각-발전량 산점도 생성 (점 색상/크기는 일사량 기준)"""
        zenith = np.asarray(zenith_angles if zenith_angles is not None else SCATTER_PLOT_DATA['zenith_angles'])
        power = np.asarray(power_values if power_values is not None else SCATTER_PLOT_DATA['power_values'])
        radiation = radiation_values if radiation_values is not None else SCATTER_PLOT_DATA['radiation_values']

        if not (len(zenith) == len(power) == len(radiation)):
            raise ValueError('zenith, power and radiation series must have the same length')

        colors = [point_color(r) for r in radiation]
        sizes = np.square([point_size(r) for r in radiation])

        fig, ax = plt.subplots(figsize=(10, 6))

        ax.scatter(zenith, power, c=colors, s=sizes, alpha=0.85, edgecolors='white', linewidths=0.5)
        ax.axhline(0, color=self.colors['warning'], linestyle='--', linewidth=1, alpha=0.6)

        # 현재 예측값 표시 (kW -> W)
        if current_zenith is not None and current_power_kw is not None:
            ax.plot(current_zenith, current_power_kw * 1000, marker='*', markersize=16,
                    color=self.colors['optimal'], markeredgecolor='black', label='Current prediction')
            ax.legend(loc='upper right')

        ax.set_title('Power Output vs Zenith Angle', fontsize=14, fontweight='bold', pad=15)
        ax.set_xlabel('Zenith Angle (°)', fontsize=12)
        ax.set_ylabel('Generated Power (W)', fontsize=12)
        ax.grid(linestyle='--', alpha=0.7)

        plt.tight_layout()

        # 바이트 스트림으로 저장
        img_bytes = BytesIO()
        plt.savefig(img_bytes, format='png', dpi=150, bbox_inches='tight')
        img_bytes.seek(0)
        plt.close(fig)

        return img_bytes
