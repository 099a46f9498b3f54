"""Embedded gazetteer: country -> municipalities -> settlements.

Municipalities are listed in the order they are scanned. The first
settlement of every municipality is its seat.
"""

from typing import Any


def _place(name: str, lat: float, lng: float, *local_names: str) -> dict[str, Any]:
    return {"name": name, "lat": lat, "lng": lng, "local_names": list(local_names)}


def _seat(name: str, lat: float, lng: float, *local_names: str) -> dict[str, Any]:
    """Municipality whose only settlement is its seat."""
    municipality = _place(name, lat, lng, *local_names)
    municipality["settlements"] = [_place(name, lat, lng, *local_names)]
    return municipality


def _municipality(
    name: str,
    lat: float,
    lng: float,
    local_names: tuple[str, ...],
    *settlements: dict[str, Any],
) -> dict[str, Any]:
    municipality = _place(name, lat, lng, *local_names)
    municipality["settlements"] = list(settlements)
    return municipality


MUNICIPALITY_DATA: dict[str, list[dict[str, Any]]] = {
    "North Macedonia": [
        _municipality(
            "Skopje", 41.9981, 21.4254, ("Скопје",),
            _place("Skopje", 41.9981, 21.4254, "Скопје"),
            _place("Centar", 41.9965, 21.4314, "Центар"),
            _place("Aerodrom", 41.9780, 21.4700, "Аеродром"),
            _place("Karpoš", 42.0050, 21.3970, "Карпош", "Karpos"),
            _place("Gazi Baba", 42.0140, 21.4650, "Гази Баба"),
            _place("Čair", 42.0130, 21.4420, "Чаир", "Cair"),
            _place("Kisela Voda", 41.9750, 21.4270, "Кисела Вода"),
            _place("Saraj", 42.0000, 21.3300, "Сарај"),
        ),
        _municipality(
            "Bitola", 41.0328, 21.3403, ("Битола",),
            _place("Bitola", 41.0328, 21.3403, "Битола"),
            _place("Dihovo", 41.0040, 21.3050, "Дихово"),
            _place("Bukovo", 41.0170, 21.3120, "Буково"),
        ),
        _municipality(
            "Ohrid", 41.1171, 20.8016, ("Охрид",),
            _place("Ohrid", 41.1171, 20.8016, "Охрид"),
            _place("Lagadin", 41.0640, 20.7970, "Лагадин"),
            _place("Peštani", 41.0127, 20.8080, "Пештани", "Pestani"),
            _place("Trpejca", 40.9580, 20.7800, "Трпејца"),
            _place("Velgošti", 41.1250, 20.8200, "Велгошти", "Velgosti"),
            _place("Ljubaništa", 40.9170, 20.7520, "Љубаништа"),
        ),
        _seat("Prilep", 41.3451, 21.5550, "Прилеп"),
        _seat("Tetovo", 42.0106, 20.9715, "Тетово"),
        _seat("Kumanovo", 42.1322, 21.7144, "Куманово"),
        _seat("Štip", 41.7458, 22.1956, "Штип", "Stip"),
        _municipality(
            "Struga", 41.1780, 20.6778, ("Струга",),
            _place("Struga", 41.1780, 20.6778, "Струга"),
            _place("Radožda", 41.1000, 20.6200, "Радожда", "Radozda"),
            _place("Kališta", 41.1650, 20.6500, "Калишта", "Kalista"),
        ),
        _seat("Gevgelija", 41.1414, 22.5025, "Гевгелија"),
        _seat("Veles", 41.7156, 21.7756, "Велес"),
        _seat("Strumica", 41.4378, 22.6428, "Струмица"),
        _seat("Kavadarci", 41.4331, 22.0119, "Кавадарци"),
        _seat("Kočani", 41.9167, 22.4128, "Кочани", "Kocani"),
        _seat("Kriva Palanka", 42.2019, 22.3317, "Крива Паланка"),
        _seat("Radoviš", 41.6383, 22.4647, "Радовиш", "Radovis"),
        _municipality(
            "Resen", 41.0889, 21.0122, ("Ресен",),
            _place("Resen", 41.0889, 21.0122, "Ресен"),
            _place("Krani", 40.9356, 21.0300, "Крани"),
            _place("Carev Dvor", 40.9970, 21.0560, "Царев Двор"),
            _place("Ljubojno", 40.9050, 21.1500, "Љубојно"),
            _place("Pretor", 40.9600, 21.0500, "Претор"),
            _place("Stenje", 40.9460, 20.9240, "Стење"),
            _place("Jankovec", 41.0630, 21.0330, "Јанковец"),
        ),
        _seat("Debar", 41.5250, 20.5272, "Дебар"),
        _seat("Vinica", 41.8828, 22.5092, "Виница"),
        _seat("Delčevo", 41.9653, 22.7742, "Делчево", "Delcevo"),
        _seat("Probištip", 42.0031, 22.1786, "Пробиштип", "Probistip"),
        _seat("Berovo", 41.7061, 22.8578, "Берово"),
        _seat("Makedonski Brod", 41.5136, 21.2153, "Македонски Брод"),
        _seat("Kratovo", 42.0781, 22.1806, "Кратово"),
        _seat("Demir Hisar", 41.2208, 21.2031, "Демир Хисар"),
        _seat("Kruševo", 41.3689, 21.2483, "Крушево", "Krusevo"),
    ],
    "Albania": [
        _seat("Tirana", 41.3275, 19.8189, "Tiranë"),
        _municipality(
            "Durrës", 41.3231, 19.4414, ("Durres",),
            _place("Durrës", 41.3231, 19.4414, "Durres"),
            _place("Golem", 41.2450, 19.5230),
        ),
        _municipality(
            "Vlorë", 40.4667, 19.4897, ("Vlora",),
            _place("Vlorë", 40.4667, 19.4897, "Vlora"),
            _place("Orikum", 40.3250, 19.4710),
        ),
        _seat("Shkodër", 42.0683, 19.5126, "Shkodra"),
        _municipality(
            "Sarandë", 39.8756, 20.0056, ("Saranda",),
            _place("Sarandë", 39.8756, 20.0056, "Saranda"),
            _place("Ksamil", 39.7700, 20.0000),
        ),
        _seat("Fier", 40.7275, 19.5628),
        _seat("Korçë", 40.6141, 20.7770, "Korca"),
        _seat("Elbasan", 41.1125, 20.0822),
        _seat("Berat", 40.7053, 19.9522),
        _seat("Lushnjë", 40.9419, 19.7050, "Lushnja"),
        _seat("Pogradec", 40.9014, 20.6550),
        _seat("Kukës", 42.0833, 20.4167, "Kukes"),
        _seat("Lezhë", 41.7814, 19.6436, "Lezha"),
        _seat("Përmet", 40.2336, 20.3517, "Permet"),
        _seat("Librazhd", 41.1969, 20.3356),
        _seat("Fushë-Krujë", 41.4783, 19.7178, "Fushe-Kruje"),
        _seat("Këlcyrë", 40.3131, 20.1892, "Kelcyre"),
        _seat("Maliq", 40.7108, 20.6994),
        _seat("Ballsh", 40.6000, 19.7333),
    ],
    "Montenegro": [
        _municipality(
            "Podgorica", 42.4410, 19.2627, ("Подгорица",),
            _place("Podgorica", 42.4410, 19.2627, "Подгорица"),
            _place("Golubovci", 42.3350, 19.2320, "Голубовци"),
        ),
        _seat("Nikšić", 42.7730, 18.9444, "Никшић", "Niksic"),
        _municipality(
            "Herceg Novi", 42.4531, 18.5375, ("Херцег Нови",),
            _place("Herceg Novi", 42.4531, 18.5375, "Херцег Нови"),
            _place("Igalo", 42.4560, 18.5100, "Игало"),
        ),
        _municipality(
            "Budva", 42.2881, 18.8423, ("Будва",),
            _place("Budva", 42.2881, 18.8423, "Будва"),
            _place("Bečići", 42.2830, 18.8680, "Бечићи", "Becici"),
            _place("Petrovac", 42.2060, 18.9420, "Петровац"),
        ),
        _municipality(
            "Kotor", 42.4247, 18.7712, ("Котор",),
            _place("Kotor", 42.4247, 18.7712, "Котор"),
            _place("Perast", 42.4870, 18.6990, "Пераст"),
        ),
        _seat("Bar", 42.0930, 19.1003, "Бар"),
        _seat("Cetinje", 42.3889, 18.9142, "Цетиње"),
        _seat("Ulcinj", 41.9236, 19.2056, "Улцињ"),
        _seat("Tivat", 42.4289, 18.6961, "Тиват"),
        _seat("Rožaje", 42.8439, 20.1678, "Рожаје", "Rozaje"),
        _seat("Pljevlja", 43.3567, 19.3583, "Пљевља"),
        _seat("Bijelo Polje", 43.0342, 19.7492, "Бијело Поље"),
        _seat("Danilovgrad", 42.5539, 19.1058, "Даниловград"),
        _seat("Mojkovac", 42.9600, 19.5833, "Мојковац"),
        _seat("Plav", 42.5969, 19.9456, "Плав"),
        _seat("Šavnik", 42.9564, 19.0886, "Шавник", "Savnik"),
        _seat("Kolašin", 42.8233, 19.5167, "Колашин", "Kolasin"),
    ],
    "Greece": [
        _seat("Athens", 37.9838, 23.7275, "Αθήνα", "Athina"),
        _municipality(
            "Thessaloniki", 40.6401, 22.9444, ("Θεσσαλονίκη",),
            _place("Thessaloniki", 40.6401, 22.9444, "Θεσσαλονίκη"),
            _place("Kalamaria", 40.5820, 22.9500, "Καλαμαριά"),
        ),
        _seat("Patras", 38.2466, 21.7346, "Πάτρα", "Patra"),
        _seat("Heraklion", 35.3387, 25.1442, "Ηράκλειο", "Iraklio"),
        _seat("Larissa", 39.6390, 22.4191, "Λάρισα"),
        _seat("Volos", 39.3610, 22.9420, "Βόλος"),
        _seat("Ioannina", 39.6670, 20.8537, "Ιωάννινα"),
        _seat("Kalamata", 37.0391, 22.1126, "Καλαμάτα"),
        _seat("Kavala", 40.9367, 24.4136, "Καβάλα"),
        _seat("Chania", 35.5122, 24.0156, "Χανιά"),
        _seat("Serres", 41.0850, 23.5475, "Σέρρες"),
        _seat("Alexandroupoli", 40.8475, 25.8744, "Αλεξανδρούπολη"),
        _seat("Kozani", 40.3011, 21.7864, "Κοζάνη"),
        _seat("Veroia", 40.5236, 22.2034, "Βέροια"),
        _seat("Agrinio", 38.6214, 21.4078, "Αγρίνιο"),
        _seat("Naousa", 40.6294, 22.0681, "Νάουσα"),
        _seat("Edessa", 40.8000, 22.0500, "Έδεσσα"),
        _seat("Florina", 40.7819, 21.4083, "Φλώρινα"),
        _seat("Grevena", 40.0847, 21.4272, "Γρεβενά"),
        _seat("Kastoria", 40.5167, 21.2667, "Καστοριά"),
        _seat("Orestiada", 41.5031, 26.5297, "Ορεστιάδα"),
    ],
    "Bulgaria": [
        _municipality(
            "Sofia", 42.6977, 23.3219, ("София",),
            _place("Sofia", 42.6977, 23.3219, "София"),
            _place("Bankya", 42.7000, 23.1450, "Банкя"),
        ),
        _seat("Plovdiv", 42.1354, 24.7453, "Пловдив"),
        _municipality(
            "Varna", 43.2141, 27.9147, ("Варна",),
            _place("Varna", 43.2141, 27.9147, "Варна"),
            _place("Zlatni Pyasatsi", 43.2850, 28.0420, "Златни пясъци", "Golden Sands"),
        ),
        _seat("Burgas", 42.5048, 27.4626, "Бургас"),
        _seat("Ruse", 43.8356, 25.9657, "Русе"),
        _seat("Stara Zagora", 42.4258, 25.6345, "Стара Загора"),
        _seat("Pleven", 43.4170, 24.6067, "Плевен"),
        _seat("Veliko Tarnovo", 43.0812, 25.6290, "Велико Търново"),
        _seat("Sliven", 42.6858, 26.3292, "Сливен"),
        _seat("Dobrich", 43.5667, 27.8333, "Добрич"),
        _seat("Shumen", 43.2713, 26.9362, "Шумен"),
        _seat("Pernik", 42.5997, 23.0308, "Перник"),
        _seat("Yambol", 42.4833, 26.5000, "Ямбол"),
        _seat("Haskovo", 41.9344, 25.5556, "Хасково"),
        _seat("Pazardzhik", 42.2000, 24.3333, "Пазарджик"),
        _seat("Smolyan", 41.5833, 24.6917, "Смолян"),
        _seat("Kardzhali", 41.6500, 25.3667, "Кърджали"),
        _seat("Kyustendil", 42.2839, 22.6911, "Кюстендил"),
        _seat("Silistra", 44.1167, 27.2667, "Силистра"),
        _seat("Razgrad", 43.5333, 26.5167, "Разград"),
        _seat("Targovishte", 43.2592, 26.5892, "Търговище"),
        _seat("Dupnitsa", 42.2667, 23.1167, "Дупница"),
    ],
    "Croatia": [
        _municipality(
            "Zagreb", 45.8150, 15.9819, (),
            _place("Zagreb", 45.8150, 15.9819),
            _place("Donji Grad", 45.8100, 15.9700),
            _place("Gornji Grad - Medveščak", 45.8200, 15.9700),
            _place("Trešnjevka", 45.8000, 15.9430, "Tresnjevka"),
        ),
        _municipality(
            "Split", 43.5081, 16.4402, (),
            _place("Split", 43.5081, 16.4402),
            _place("Grad", 43.5100, 16.4400),
            _place("Marjan", 43.5200, 16.4200),
        ),
        _seat("Rijeka", 45.3271, 14.4422),
        _seat("Zadar", 44.1194, 15.2314),
        _municipality(
            "Dubrovnik", 42.6507, 18.0944, (),
            _place("Dubrovnik", 42.6507, 18.0944),
            _place("Lapad", 42.6540, 18.0730),
        ),
        _seat("Osijek", 45.5540, 18.6955),
        _seat("Pula", 44.8666, 13.8496),
        _seat("Šibenik", 43.7339, 15.8956, "Sibenik"),
        _seat("Varaždin", 46.3058, 16.3364, "Varazdin"),
        _seat("Karlovac", 45.4953, 15.5478),
        _seat("Sisak", 45.4869, 16.3764),
        _seat("Velika Gorica", 45.7125, 16.0756),
        _seat("Bjelovar", 45.8986, 16.8422),
        _seat("Koprivnica", 46.1628, 16.8275),
        _seat("Đakovo", 45.3086, 18.4106, "Djakovo"),
        _seat("Virovitica", 45.8319, 17.3839),
        _seat("Požega", 45.3403, 17.6850, "Pozega"),
        _seat("Slavonski Brod", 45.1667, 18.0167),
        _seat("Vukovar", 45.3436, 19.0022),
        _seat("Sinj", 43.7000, 16.6333),
        _seat("Knin", 44.0333, 16.2000),
    ],
    "Serbia": [
        _municipality(
            "Belgrade", 44.7872, 20.4573, ("Beograd", "Београд"),
            _place("Belgrade", 44.7872, 20.4573, "Beograd", "Београд"),
            _place("Stari Grad", 44.8200, 20.4600, "Стари Град"),
            _place("Novi Beograd", 44.8100, 20.4100, "Нови Београд"),
            _place("Zemun", 44.8400, 20.3700, "Земун"),
            _place("Vračar", 44.7990, 20.4770, "Врачар", "Vracar"),
            _place("Voždovac", 44.7670, 20.4910, "Вождовац", "Vozdovac"),
        ),
        _municipality(
            "Novi Sad", 45.2671, 19.8335, ("Нови Сад",),
            _place("Novi Sad", 45.2671, 19.8335, "Нови Сад"),
            _place("Petrovaradin", 45.2510, 19.8670, "Петроварадин"),
        ),
        _seat("Niš", 43.3209, 21.8958, "Ниш", "Nis"),
        _seat("Kragujevac", 44.0128, 20.9114, "Крагујевац"),
        _seat("Subotica", 46.1000, 19.6667, "Суботица"),
        _seat("Čačak", 43.8914, 20.3497, "Чачак", "Cacak"),
        _seat("Novi Pazar", 43.1406, 20.5122, "Нови Пазар"),
        _seat("Zrenjanin", 45.3836, 20.3819, "Зрењанин"),
        _seat("Pančevo", 44.8700, 20.6400, "Панчево", "Pancevo"),
        _seat("Smederevo", 44.6658, 20.9300, "Смедерево"),
        _seat("Leskovac", 42.9981, 21.9461, "Лесковац"),
        _seat("Valjevo", 44.2667, 19.8833, "Ваљево"),
        _seat("Kruševac", 43.5800, 21.3339, "Крушевац", "Krusevac"),
        _seat("Užice", 43.8558, 19.8428, "Ужице", "Uzice"),
        _seat("Vranje", 42.5542, 21.8972, "Врање"),
        _seat("Šabac", 44.7564, 19.6900, "Шабац", "Sabac"),
        _seat("Sombor", 45.7742, 19.1122, "Сомбор"),
        _seat("Požarevac", 44.6208, 21.1878, "Пожаревац", "Pozarevac"),
        _seat("Pirot", 43.1531, 22.5861, "Пирот"),
        _seat("Zaječar", 43.9036, 22.2644, "Зајечар", "Zajecar"),
        _seat("Kikinda", 45.8289, 20.4653, "Кикинда"),
        _municipality(
            "Zlatibor", 43.7200, 19.7000, ("Златибор",),
            _place("Zlatibor", 43.7200, 19.7000, "Златибор"),
            _place("Čajetina", 43.7500, 19.7100, "Чајетина", "Cajetina"),
        ),
    ],
    "Kosovo": [
        _seat("Pristina", 42.6629, 21.1655, "Prishtina", "Priština", "Приштина"),
        _seat("Prizren", 42.2139, 20.7397, "Призрен"),
        _seat("Peja", 42.6603, 20.2924, "Peć", "Пећ"),
        _seat("Gjakova", 42.3803, 20.4308, "Đakovica", "Ђаковица"),
        _seat("Mitrovica", 42.8914, 20.8667, "Mitrovicë", "Митровица"),
        _seat("Ferizaj", 42.3703, 21.1553, "Uroševac", "Урошевац"),
        _seat("Gjilan", 42.4653, 21.4653, "Gnjilane", "Гњилане"),
        _seat("Podujeva", 42.9106, 21.1961, "Podujevo", "Подујево"),
        _seat("Vushtrri", 42.8231, 20.9678, "Vučitrn", "Вучитрн"),
        _seat("Suhareka", 42.3586, 20.8253, "Suva Reka", "Сува Река"),
        _seat("Rahovec", 42.3992, 20.6542, "Orahovac", "Ораховац"),
        _seat("Malisheva", 42.4822, 20.7458, "Mališevo", "Малишево"),
        _seat("Skenderaj", 42.7383, 20.7889, "Srbica", "Србица"),
        _seat("Vitia", 42.3214, 21.3583, "Vitina", "Витина"),
        _seat("Deçan", 42.5378, 20.2878, "Dečani", "Дечани"),
        _seat("Lipjan", 42.5242, 21.1258, "Lipljan", "Липљан"),
    ],
    "Bosnia and Herzegovina": [
        _municipality(
            "Sarajevo", 43.8563, 18.4131, ("Сарајево",),
            _place("Sarajevo", 43.8563, 18.4131, "Сарајево"),
            _place("Stari Grad", 43.8600, 18.4300, "Стари Град"),
            _place("Centar", 43.8600, 18.4100, "Центар"),
            _place("Ilidža", 43.8300, 18.3100, "Илиџа", "Ilidza"),
        ),
        _seat("Banja Luka", 44.7722, 17.1910, "Бања Лука"),
        _seat("Mostar", 43.3438, 17.8078, "Мостар"),
        _seat("Tuzla", 44.5384, 18.6671, "Тузла"),
        _seat("Zenica", 44.2039, 17.9078, "Зеница"),
        _seat("Bijeljina", 44.7569, 19.2163, "Бијељина"),
        _seat("Trebinje", 42.7118, 18.3436, "Требиње"),
        _seat("Prijedor", 44.9800, 16.7108, "Приједор"),
        _seat("Doboj", 44.7319, 18.0878, "Добој"),
        _seat("Cazin", 44.9664, 15.9428),
        _seat("Bihać", 44.8156, 15.8708, "Bihac"),
        _seat("Brčko", 44.8728, 18.8083, "Брчко", "Brcko"),
        _seat("Livno", 43.8269, 17.0081),
        _seat("Gračanica", 44.7031, 18.3100, "Gracanica"),
        _seat("Konjic", 43.6519, 17.9608),
        _seat("Goražde", 43.6678, 18.9764, "Gorazde"),
        _seat("Visoko", 43.9889, 18.1781),
        _seat("Zavidovići", 44.4458, 18.1497, "Zavidovici"),
        _seat("Živinice", 44.4492, 18.6464, "Zivinice"),
        _seat("Sanski Most", 44.7653, 16.6658),
        _seat("Gradiška", 45.1414, 17.2503, "Градишка", "Gradiska"),
    ],
    "Slovenia": [
        _municipality(
            "Ljubljana", 46.0569, 14.5058, (),
            _place("Ljubljana", 46.0569, 14.5058),
            _place("Center", 46.0500, 14.5000),
            _place("Šiška", 46.0700, 14.4800, "Siska"),
        ),
        _seat("Maribor", 46.5547, 15.6459),
        _seat("Celje", 46.2397, 15.2677),
        _seat("Kranj", 46.2389, 14.3556),
        _seat("Koper", 45.5481, 13.7302, "Capodistria"),
        _seat("Novo Mesto", 45.8040, 15.1689),
        _municipality(
            "Bled", 46.3683, 14.1146, (),
            _place("Bled", 46.3683, 14.1146),
            _place("Zasip", 46.3890, 14.1030),
        ),
        _seat("Piran", 45.5283, 13.5683, "Pirano"),
    ],
}
