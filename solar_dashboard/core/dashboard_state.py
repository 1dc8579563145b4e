"""
대시보드 상태 보관 및 구독 관리
"""
from dataclasses import replace
from typing import Callable, List, Optional

from solar_dashboard.core.models import DashboardData

Subscriber = Callable[[DashboardData], None]


class DashboardState:
    """
    대시보드 상태를 단일 레코드로 보관하는 클래스

    애플리케이션 세션마다 하나를 생성해 공유한다. 갱신은 항상 새 레코드로
    교체하는 방식이며, 구독자에게 발행 순서대로 전달된다.
    새 구독자는 구독 즉시 가장 최근 상태를 한 번 받는다.
    """

    def __init__(self, initial: Optional[DashboardData] = None):
        self._value = initial if initial is not None else DashboardData.initial()
        self._subscribers: List[Subscriber] = []

    @property
    def value(self) -> DashboardData:
        """현재 상태 스냅샷"""
        return self._value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        상태 변경 구독

        Args:
            callback: 새 상태 레코드를 인자로 받는 함수

        Returns:
            구독 해제 함수
        """
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def apply_update(self, **changes) -> DashboardData:
        """부분 갱신 후 새 상태 발행"""
        self._publish(replace(self._value, **changes))
        return self._value

    def reset(self) -> DashboardData:
        """초기 상태로 되돌림"""
        self._publish(DashboardData.initial())
        return self._value

    def _publish(self, data: DashboardData):
        self._value = data
        # 콜백 안에서 구독 해제가 일어나도 이번 발행은 모두 전달
        for callback in list(self._subscribers):
            callback(data)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
