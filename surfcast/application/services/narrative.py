"""User-facing text for surf assessments.

All zh-TW wording lives here. Classification code refers to messages by
id and interpolates values through `render`, so the decision logic can be
tested without comparing sentences.
"""

from surfcast.application.services.wave_classifier import (
    PeriodClass,
    WaveClassifierService,
    WaveFeatures,
    WavePower,
    WaveSize,
)
from surfcast.application.services.wind_classifier import (
    WindClassifierService,
    WindQuality,
    WindType,
)

SIZE_LABELS = {
    WaveSize.FLAT: "平坦",
    WaveSize.ANKLE: "腳踝浪",
    WaveSize.KNEE: "膝蓋浪",
    WaveSize.THIGH: "大腿浪",
    WaveSize.WAIST: "腰浪",
    WaveSize.CHEST: "胸浪",
    WaveSize.SHOULDER: "肩浪",
    WaveSize.HEAD: "頭浪",
    WaveSize.OVERHEAD: "過頭浪",
    WaveSize.DOUBLE_OVERHEAD: "兩倍人高",
}

PERIOD_LABELS = {
    PeriodClass.WIND_SWELL: ("風浪", "雜亂"),
    PeriodClass.MIXED: ("混合浪", "普通"),
    PeriodClass.GROUND_SWELL: ("湧浪", "良好"),
    PeriodClass.LONG_PERIOD: ("長週期湧浪", "優異"),
}

POWER_LABELS = {
    WavePower.WEAK: "軟弱",
    WavePower.MODERATE: "普通",
    WavePower.SOLID: "有力",
    WavePower.HEAVY: "強勁",
    WavePower.DANGEROUS: "危險",
}

WIND_TYPE_LABELS = {
    WindType.OFFSHORE: "離岸風",
    WindType.ONSHORE: "向岸風",
    WindType.CROSS_SHORE: "側風",
    WindType.UNKNOWN: "風向未知",
}

WIND_QUALITY_TEXT = {
    WindQuality.EXCELLENT: "優",
    WindQuality.FAIR: "普通",
    WindQuality.POOR: "差",
    WindQuality.UNKNOWN: "--",
}

BOARD_NAMES = {
    "longboard": "長板",
    "shortboard": "短板",
    "funboard": "Fun Board",
    "none": "無",
}

MESSAGES: dict[str, str] = {
    # Insufficient input
    "insufficient.wave": "浪況資訊不足,無法分析。",
    "insufficient.wind": "風況資訊不足,無法分析。",
    "insufficient.overall": "資訊不足,無法進行綜合評估。",
    # Board suitability
    "board.danger": "危險海況不適合任何板型",
    "longboard.perfect": "小浪配上長週期與乾淨浪面,長板能輕鬆起乘並享受滑行",
    "longboard.good": "浪況適中,週期足夠,長板能發揮優勢",
    "longboard.textured": "浪高與週期適合長板,但浪面略顯凌亂",
    "longboard.flat_long_period": "浪極小但週期長,長板仍可能抓到一些浪",
    "longboard.big_heavy": "浪況強勁,長板較難控制且有安全疑慮",
    "longboard.big_manageable": "浪稍大但仍可控,有經驗的長板玩家可嘗試",
    "longboard.wind_swell": "風浪週期短,長板難以獲得足夠推力",
    "longboard.default": "條件普通,長板可以使用但非最佳狀態",
    "shortboard.perfect": "理想浪高配上紮實推力與乾淨浪面,短板能盡情發揮",
    "shortboard.good": "浪高與推力適中,短板能順利起乘並做動作",
    "shortboard.textured": "浪況基本符合短板需求,但浪面略顯凌亂",
    "shortboard.too_small": "浪太小且缺乏推力,短板難以起乘",
    "shortboard.small_long_period": "浪小但週期長,有經驗的短板玩家仍可起乘",
    "shortboard.big_short_period": "浪雖大但週期短,缺乏推力且容易關門",
    "shortboard.big_warning": "浪況強勁,僅適合進階玩家",
    "shortboard.big": "大浪條件,適合有經驗的短板玩家挑戰",
    "shortboard.blown_out": "浪面被風吹亂,難以做動作",
    "shortboard.default": "條件普通,短板可以使用但非最佳狀態",
    "funboard.perfect": "中等浪況,趣味板能兼顧起乘容易度與操控性",
    "funboard.good": "浪況適合趣味板的多功能特性",
    "funboard.too_small": "浪太小,長板會更容易起乘",
    "funboard.too_big": "浪況強勁,短板會更靈活",
    "funboard.poor": "條件不佳,影響趣味板的表現",
    "funboard.default": "趣味板的多功能性適合當前條件",
    # Pairwise interactions
    "power_texture.blown_out": "浪面被風吹亂，影響浪況品質",
    "power_texture.small_clean": "小浪配上鏡面般的浪面，適合長板",
    "power_texture.powerful_clean": "有力的浪配上乾淨的浪面",
    "power_texture.choppy": "浪面凌亂，降低浪況品質",
    "power_texture.neutral": "浪面質地普通",
    "period_size.small_long_period": "雖然浪小，但長週期帶來紮實的推力",
    "period_size.big_short_period": "浪雖大但週期短，缺乏推力",
    "period_size.big_long_period": "長週期配上適中浪高，能量充沛",
    "period_size.neutral": "浪高與週期搭配普通",
    "wind_safety.dangerous": "風速過強，存在安全疑慮",
    "wind_safety.strong": "風力較強，需注意安全",
    "wind_safety.ideal": "風向風速理想",
    "wind_safety.neutral": "風況普通",
    # Conflict resolution
    "resolution.danger": "安全疑慮為首要考量，其他條件次之",
    "resolution.warning": "需注意安全，建議謹慎評估",
    "resolution.texture": "浪面品質影響整體體驗，比浪高更重要",
    "resolution.period": "週期短導致浪缺乏推力，儘管浪高看似足夠",
    "resolution.size": "浪況強勁，適合進階玩家",
    "resolution.balanced": "各項條件相對平衡",
    # Chemistry patterns
    "chemistry.perfect-conditions": "理想的浪高、長週期與乾淨的浪面，完美組合",
    "chemistry.wasted-potential": "浪況本身不錯，但被風吹亂而浪費了潛力",
    "chemistry.longboard-paradise": "小浪配上鏡面般的浪面與長週期，長板玩家的天堂",
    "chemistry.hidden-gem": "浪雖小但週期長，隱藏的好浪況",
    "chemistry.none": "",
    # Overall assessment
    "assessment.danger": "危險海況，存在嚴重安全疑慮（{concerns}），強烈建議不要下水。",
    "assessment.danger_unspecified": "危險海況，存在嚴重安全疑慮，強烈建議不要下水。",
    "assessment.warning": "需注意安全（{concerns}），{resolution}。建議謹慎評估自身能力。",
    "assessment.warning_unspecified": "需注意安全，{resolution}。建議謹慎評估自身能力。",
    "assessment.excellent": "綜合來看，各項條件配合良好，浪況優異，適合衝浪。",
    "assessment.good": "綜合來看，條件不錯，值得下水。",
    "assessment.mixed_resolved": "綜合來看，{resolution}。",
    "assessment.mixed": "綜合來看，條件普通，可以衝浪但非最佳狀態。",
    "assessment.poor_resolved": "綜合來看，{resolution}。不建議下水。",
    "assessment.poor": "綜合來看，條件不佳，建議等待改善。",
    # Wave narrative
    "wave.summary": "浪高 {height:.1f}m ({size})，週期 {period:.0f}秒（{period_desc}），浪況{power}。",
    # Wind narrative
    "wind.offshore_unsafe": "{wind_type} {speed:g} km/h,風速過強,可能將衝浪者吹離岸邊,存在安全疑慮。",
    "wind.offshore_ideal": "{wind_type} {speed:g} km/h,受惠於理想的風向風速,浪面乾淨,條件優異。",
    "wind.offshore_glassy": "風速極輕（{speed:g} km/h）,浪面平滑如鏡,接近完美的無風狀態。",
    "wind.offshore_good": "{wind_type} {speed:g} km/h,風向良好,浪面整理得宜,適合衝浪。",
    "wind.onshore_light": "{wind_type} {speed:g} km/h,風力輕微,對浪況影響有限。",
    "wind.onshore_moderate": "{wind_type} {speed:g} km/h,受風況影響,浪面較為混亂,條件普通。",
    "wind.onshore_strong": "{wind_type} {speed:g} km/h,強風吹向岸邊,浪面凌亂,條件不佳。",
    "wind.cross_mild": "{wind_type} {speed:g} km/h,風力溫和,浪況穩定,條件尚可。",
    "wind.cross_moderate": "{wind_type} {speed:g} km/h,受側風影響,浪面有些波動,條件普通。",
    "wind.cross_strong": "{wind_type} {speed:g} km/h,側風較強,浪況不穩定,需謹慎評估。",
}


def render(message_id: str, **values) -> str:
    """Render a catalog message with interpolated values.

    Args:
        message_id: Key into MESSAGES
        **values: Values substituted into the message template

    Returns:
        The rendered message

    Raises:
        KeyError: If the message id is not in the catalog
    """
    template = MESSAGES[message_id]
    return template.format(**values) if values else template


def describe_features(
    wave: WaveFeatures | None,
    wind_type: WindType,
    wind_quality: WindQuality,
) -> dict[str, str | None]:
    """zh-TW display labels for classified features, None where unclassified."""
    period_desc, period_quality = PERIOD_LABELS[wave.period] if wave else (None, None)
    return {
        "size": SIZE_LABELS[wave.size] if wave else None,
        "period": period_desc,
        "periodQuality": period_quality,
        "power": POWER_LABELS[wave.power] if wave else None,
        "windType": WIND_TYPE_LABELS[wind_type],
        "windQuality": WIND_QUALITY_TEXT[wind_quality],
    }


def generate_wave_narrative(wave_height_m: float | None, wave_period_s: float | None) -> str:
    """Describe wave height, period and power in one sentence."""
    if not WaveClassifierService.has_sufficient_data(wave_height_m, wave_period_s):
        return render("insufficient.wave")

    features = WaveClassifierService.classify(wave_height_m, wave_period_s)
    period_desc, _ = PERIOD_LABELS[features.period]

    return render(
        "wave.summary",
        height=wave_height_m,
        size=SIZE_LABELS[features.size],
        period=wave_period_s,
        period_desc=period_desc,
        power=POWER_LABELS[features.power],
    )


def _wind_message_id(wind_type: WindType, speed: float) -> str:
    if wind_type == WindType.OFFSHORE:
        if speed > 30:
            return "wind.offshore_unsafe"
        if 15 <= speed <= 25:
            return "wind.offshore_ideal"
        if speed < 8:
            return "wind.offshore_glassy"
        return "wind.offshore_good"

    if wind_type == WindType.ONSHORE:
        if speed < 8:
            return "wind.onshore_light"
        if speed < 20:
            return "wind.onshore_moderate"
        return "wind.onshore_strong"

    if speed < 10:
        return "wind.cross_mild"
    if speed < 20:
        return "wind.cross_moderate"
    return "wind.cross_strong"


def generate_wind_narrative(
    wind_direction: float | str | None,
    wind_speed_kmh: float | None,
    beach_facing_deg: float | None,
) -> str:
    """Describe the wind's effect on the surf at a spot.

    Args:
        wind_direction: Direction wind comes FROM, as degrees or text
        wind_speed_kmh: Wind speed in km/h
        beach_facing_deg: Beach facing direction in degrees

    Returns:
        Natural language wind analysis
    """
    analysis = WindClassifierService.analyze(wind_direction, wind_speed_kmh, beach_facing_deg)

    if analysis.wind_type == WindType.UNKNOWN:
        return render("insufficient.wind")

    return render(
        _wind_message_id(analysis.wind_type, analysis.wind_speed_kmh),
        wind_type=WIND_TYPE_LABELS[analysis.wind_type],
        speed=analysis.wind_speed_kmh,
    )
