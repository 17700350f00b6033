"""CWA endpoint constants and the city alias table agreed with the front-end."""

CWA_BASE_URL = "https://opendata.cwa.gov.tw/api"
CWA_FORECAST_DATASET = "F-C0032-001"  # 一般天氣預報-今明 36 小時天氣預報

# Keys are lower-case; lookups lower-case the incoming token first.
CITY_ALIASES: dict[str, str] = {
    "taipei": "臺北市",
    "newtaipei": "新北市",
    "taoyuan": "桃園市",
    "taichung": "臺中市",
    "tainan": "臺南市",
    "kaohsiung": "高雄市",
    "keelung": "基隆市",
    "hsinchu": "新竹市",
    "hsinchucounty": "新竹縣",
    "miaoli": "苗栗縣",
    "changhua": "彰化縣",
    "nantou": "南投縣",
    "yunlin": "雲林縣",
    "chiayi": "嘉義市",
    "chiayicounty": "嘉義縣",
    "pingtung": "屏東縣",
    "yilan": "宜蘭縣",
    "hualien": "花蓮縣",
    "taitung": "臺東縣",
    "penghu": "澎湖縣",
    "kinmen": "金門縣",
    "lienchiang": "連江縣",
}
