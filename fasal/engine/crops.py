from typing import List
from fasal.schema import Crop

# Rainfall ranges use the same seasonal-mm scale as the normalizer domain (20-298).
# Yield is kg/acre, investment INR/acre, price INR/kg.
_ROWS = [
    {"id":1, "name_en":"Wheat", "name_hi":"गेहूं", "season":"rabi",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":12, "temperature_max":25, "rainfall_min":35, "rainfall_max":90,
     "investment_per_acre":25000, "expected_yield_per_acre":1800, "roi_percentage":35, "current_price_per_kg":24,
     "growing_states":["Punjab","Haryana","Uttar Pradesh","Madhya Pradesh","Rajasthan"], "image":"🌾",
     "description_en":"Wheat is a major cereal grain crop suitable for winter season cultivation.",
     "description_hi":"गेहूं एक प्रमुख अनाज फसल है जो शीतकालीन खेती के लिए उपयुक्त है।"},
    {"id":2, "name_en":"Rice", "name_hi":"चावल", "season":"kharif",
     "soil_ph_min":5.5, "soil_ph_max":7.0, "temperature_min":20, "temperature_max":35, "rainfall_min":180, "rainfall_max":298,
     "investment_per_acre":30000, "expected_yield_per_acre":2200, "roi_percentage":40, "current_price_per_kg":22,
     "growing_states":["West Bengal","Punjab","Haryana","Andhra Pradesh","Tamil Nadu"], "image":"🌾",
     "description_en":"Rice is the staple food crop requiring abundant water and warm climate.",
     "description_hi":"चावल मुख्य खाद्य फसल है जिसके लिए भरपूर पानी और गर्म जलवायु की आवश्यकता होती है।"},
    {"id":3, "name_en":"Maize", "name_hi":"मक्का", "season":"kharif",
     "soil_ph_min":5.5, "soil_ph_max":7.5, "temperature_min":18, "temperature_max":32, "rainfall_min":60, "rainfall_max":110,
     "investment_per_acre":22000, "expected_yield_per_acre":2000, "roi_percentage":45, "current_price_per_kg":20,
     "growing_states":["Karnataka","Madhya Pradesh","Bihar","Telangana"], "image":"🌽",
     "description_en":"Maize is a versatile cereal used for food, feed and industry.",
     "description_hi":"मक्का एक बहुउपयोगी अनाज है जो भोजन, चारे और उद्योग में काम आता है।"},
    {"id":4, "name_en":"Sugarcane", "name_hi":"गन्ना", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":8.0, "temperature_min":20, "temperature_max":38, "rainfall_min":100, "rainfall_max":200,
     "investment_per_acre":50000, "expected_yield_per_acre":35000, "roi_percentage":45, "current_price_per_kg":3.5,
     "growing_states":["Uttar Pradesh","Maharashtra","Karnataka","Tamil Nadu","Punjab"], "image":"🎋",
     "description_en":"Sugarcane is a cash crop requiring high investment but giving excellent returns.",
     "description_hi":"गन्ना एक नकदी फसल है जिसमें अधिक निवेश की आवश्यकता होती है लेकिन बेहतरीन रिटर्न मिलता है।"},
    {"id":5, "name_en":"Cotton", "name_hi":"कपास", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":8.0, "temperature_min":21, "temperature_max":35, "rainfall_min":60, "rainfall_max":110,
     "investment_per_acre":40000, "expected_yield_per_acre":800, "roi_percentage":50, "current_price_per_kg":66,
     "growing_states":["Gujarat","Maharashtra","Telangana","Andhra Pradesh","Punjab"], "image":"🌱",
     "description_en":"Cotton is a major commercial crop with high market value and export potential.",
     "description_hi":"कपास एक प्रमुख व्यावसायिक फसल है जिसका उच्च बाजार मूल्य और निर्यात क्षमता है।"},
    {"id":6, "name_en":"Soybean", "name_hi":"सोयाबीन", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":20, "temperature_max":30, "rainfall_min":60, "rainfall_max":120,
     "investment_per_acre":20000, "expected_yield_per_acre":1000, "roi_percentage":30, "current_price_per_kg":42,
     "growing_states":["Madhya Pradesh","Maharashtra","Rajasthan","Karnataka"], "image":"🫘",
     "description_en":"Soybean is a protein-rich oilseed crop with good market demand.",
     "description_hi":"सोयाबीन एक प्रोटीन युक्त तिलहन फसल है जिसकी बाजार में अच्छी मांग है।"},
    {"id":7, "name_en":"Chickpea", "name_hi":"चना", "season":"rabi",
     "soil_ph_min":6.0, "soil_ph_max":8.0, "temperature_min":17, "temperature_max":27, "rainfall_min":65, "rainfall_max":95,
     "investment_per_acre":18000, "expected_yield_per_acre":800, "roi_percentage":55, "current_price_per_kg":55,
     "growing_states":["Madhya Pradesh","Rajasthan","Maharashtra","Uttar Pradesh"], "image":"🫘",
     "description_en":"Chickpea is a hardy winter pulse that fixes nitrogen and needs little irrigation.",
     "description_hi":"चना एक मजबूत रबी दलहन है जो नाइट्रोजन स्थिर करता है और कम सिंचाई मांगता है।"},
    {"id":8, "name_en":"Lentil", "name_hi":"मसूर", "season":"rabi",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":15, "temperature_max":25, "rainfall_min":35, "rainfall_max":55,
     "investment_per_acre":15000, "expected_yield_per_acre":500, "roi_percentage":50, "current_price_per_kg":62,
     "growing_states":["Uttar Pradesh","Madhya Pradesh","Bihar","West Bengal"], "image":"🫘",
     "description_en":"Lentil is a low-input rabi pulse suited to residual soil moisture.",
     "description_hi":"मसूर कम लागत वाली रबी दलहन है जो बची हुई मिट्टी की नमी में अच्छी होती है।"},
    {"id":9, "name_en":"Mustard", "name_hi":"सरसों", "season":"rabi",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":14, "temperature_max":24, "rainfall_min":30, "rainfall_max":65,
     "investment_per_acre":16000, "expected_yield_per_acre":650, "roi_percentage":60, "current_price_per_kg":55,
     "growing_states":["Rajasthan","Haryana","Uttar Pradesh","Madhya Pradesh"], "image":"🌼",
     "description_en":"Mustard is a rabi oilseed that tolerates dry conditions.",
     "description_hi":"सरसों एक रबी तिलहन फसल है जो सूखे को सहन कर लेती है।"},
    {"id":10, "name_en":"Groundnut", "name_hi":"मूंगफली", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":7.8, "temperature_min":24, "temperature_max":32, "rainfall_min":55, "rainfall_max":110,
     "investment_per_acre":28000, "expected_yield_per_acre":900, "roi_percentage":45, "current_price_per_kg":60,
     "growing_states":["Gujarat","Andhra Pradesh","Tamil Nadu","Karnataka"], "image":"🥜",
     "description_en":"Groundnut is an oilseed legume that does well on light sandy loams.",
     "description_hi":"मूंगफली एक तिलहनी दलहन है जो हल्की बलुई दोमट मिट्टी में अच्छी होती है।"},
    {"id":11, "name_en":"Pigeon Peas", "name_hi":"अरहर", "season":"kharif",
     "soil_ph_min":5.0, "soil_ph_max":7.5, "temperature_min":18, "temperature_max":36, "rainfall_min":90, "rainfall_max":200,
     "investment_per_acre":17000, "expected_yield_per_acre":500, "roi_percentage":55, "current_price_per_kg":70,
     "growing_states":["Maharashtra","Karnataka","Madhya Pradesh","Uttar Pradesh"], "image":"🫛",
     "description_en":"Pigeon pea is a deep-rooted kharif pulse suited to rainfed farms.",
     "description_hi":"अरहर गहरी जड़ों वाली खरीफ दलहन है जो बारानी खेती के लिए उपयुक्त है।"},
    {"id":12, "name_en":"Mung Bean", "name_hi":"मूंग", "season":"zaid",
     "soil_ph_min":6.2, "soil_ph_max":7.2, "temperature_min":27, "temperature_max":32, "rainfall_min":35, "rainfall_max":60,
     "investment_per_acre":12000, "expected_yield_per_acre":400, "roi_percentage":55, "current_price_per_kg":75,
     "growing_states":["Rajasthan","Maharashtra","Andhra Pradesh","Punjab"], "image":"🫛",
     "description_en":"Mung bean is a short-duration summer pulse that fits between main seasons.",
     "description_hi":"मूंग कम अवधि की जायद दलहन है जो मुख्य मौसमों के बीच उगाई जाती है।"},
    {"id":13, "name_en":"Watermelon", "name_hi":"तरबूज", "season":"zaid",
     "soil_ph_min":6.0, "soil_ph_max":7.0, "temperature_min":24, "temperature_max":32, "rainfall_min":40, "rainfall_max":60,
     "investment_per_acre":35000, "expected_yield_per_acre":10000, "roi_percentage":60, "current_price_per_kg":8,
     "growing_states":["Uttar Pradesh","Karnataka","Andhra Pradesh","Tamil Nadu"], "image":"🍉",
     "description_en":"Watermelon is a summer fruit crop with quick returns on sandy river beds.",
     "description_hi":"तरबूज गर्मी की फल फसल है जो रेतीली नदी तटों पर जल्दी आय देती है।"},
    {"id":14, "name_en":"Banana", "name_hi":"केला", "season":"kharif",
     "soil_ph_min":5.5, "soil_ph_max":7.0, "temperature_min":25, "temperature_max":32, "rainfall_min":90, "rainfall_max":120,
     "investment_per_acre":80000, "expected_yield_per_acre":12000, "roi_percentage":70, "current_price_per_kg":15,
     "growing_states":["Tamil Nadu","Maharashtra","Gujarat","Andhra Pradesh","Kerala"], "image":"🍌",
     "description_en":"Banana is a high-value horticulture crop for warm humid regions.",
     "description_hi":"केला गर्म और नम क्षेत्रों के लिए उच्च मूल्य वाली बागवानी फसल है।"},
    {"id":15, "name_en":"Mango", "name_hi":"आम", "season":"kharif",
     "soil_ph_min":4.5, "soil_ph_max":7.0, "temperature_min":27, "temperature_max":36, "rainfall_min":89, "rainfall_max":101,
     "investment_per_acre":40000, "expected_yield_per_acre":4000, "roi_percentage":80, "current_price_per_kg":40,
     "growing_states":["Uttar Pradesh","Andhra Pradesh","Karnataka","Bihar","Gujarat"], "image":"🥭",
     "description_en":"Mango is a long-lived orchard crop with strong domestic and export demand.",
     "description_hi":"आम लंबे समय तक फल देने वाली बाग फसल है जिसकी देश और विदेश में अच्छी मांग है।"},
    {"id":16, "name_en":"Jute", "name_hi":"जूट", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":23, "temperature_max":27, "rainfall_min":150, "rainfall_max":200,
     "investment_per_acre":20000, "expected_yield_per_acre":1000, "roi_percentage":40, "current_price_per_kg":50,
     "growing_states":["West Bengal","Bihar","Assam","Odisha"], "image":"🌿",
     "description_en":"Jute is a fibre crop that thrives in the humid alluvial plains of the east.",
     "description_hi":"जूट एक रेशा फसल है जो पूर्व के नम जलोढ़ मैदानों में अच्छी होती है।"},
    {"id":17, "name_en":"Bajra", "name_hi":"बाजरा", "season":"kharif",
     "soil_ph_min":6.5, "soil_ph_max":8.2, "temperature_min":25, "temperature_max":38, "rainfall_min":20, "rainfall_max":55,
     "investment_per_acre":10000, "expected_yield_per_acre":800, "roi_percentage":45, "current_price_per_kg":25,
     "growing_states":["Rajasthan","Gujarat","Haryana","Uttar Pradesh"], "image":"🌾",
     "description_en":"Pearl millet is a drought-tolerant cereal for arid and semi-arid areas.",
     "description_hi":"बाजरा सूखा सहने वाला अनाज है जो शुष्क और अर्ध-शुष्क क्षेत्रों के लिए है।"},
    {"id":18, "name_en":"Potato", "name_hi":"आलू", "season":"rabi",
     "soil_ph_min":5.0, "soil_ph_max":7.0, "temperature_min":12, "temperature_max":22, "rainfall_min":40, "rainfall_max":80,
     "investment_per_acre":60000, "expected_yield_per_acre":10000, "roi_percentage":50, "current_price_per_kg":12,
     "growing_states":["Uttar Pradesh","West Bengal","Bihar","Punjab","Gujarat"], "image":"🥔",
     "description_en":"Potato is a cool-season tuber crop with high yield per acre.",
     "description_hi":"आलू ठंडे मौसम की कंद फसल है जिसकी प्रति एकड़ पैदावार अधिक होती है।"},
    {"id":19, "name_en":"Coffee", "name_hi":"कॉफ़ी", "season":"kharif",
     "soil_ph_min":6.0, "soil_ph_max":7.5, "temperature_min":23, "temperature_max":28, "rainfall_min":115, "rainfall_max":200,
     "investment_per_acre":70000, "expected_yield_per_acre":400, "roi_percentage":60, "current_price_per_kg":300,
     "growing_states":["Karnataka","Kerala","Tamil Nadu"], "image":"☕",
     "description_en":"Coffee is a plantation crop for shaded hill slopes with steady rainfall.",
     "description_hi":"कॉफ़ी छायादार पहाड़ी ढलानों की बागान फसल है जिसे नियमित वर्षा चाहिए।"},
]

CROPS: List[Crop] = [Crop(**row) for row in _ROWS]
