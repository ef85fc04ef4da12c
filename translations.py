"""
Translations for the FlashMint site.
Supports Thai (th), English (en) and Chinese (zh).
"""
import re

LANG_DATA = {
    "th": {
        # Page title and navigation
        "appTitle": "FlashMint | อนาคตของรายได้ดิจิทัล",
        "navHome": "หน้าแรก",
        "navTokenomics": "โทเคโนมิกส์",
        "navIncome": "เครื่องยนต์รายได้",
        "navBurn": "กลไกการเผา",
        "navRoadmap": "แผนงาน",
        "langMenuLabel": "ภาษา",

        # Hero
        "heroTitle": "FlashMint (FM)<br>โทเคนที่เติบโตไปพร้อมชุมชน",
        "heroSubtitle": "ถือ NFT ระดับ Flash แล้วรับผลตอบแทน **สูงสุด 4 เท่า** ของต้นทุน พร้อมอุปทานที่ลดลงทุกปี",
        "heroCta": "เริ่มต้นเลย",

        # Tokenomics
        "tokenomicsTitle": "โทเคโนมิกส์",
        "tokenomicsDesc": "อุปทานทั้งหมด **1,000,000,000 FM** แบ่งสรรเพื่อความยั่งยืนของระบบนิเวศ",
        "tokenomicsNote": "สัดส่วนทั้งหมดถูกล็อกไว้ในสัญญาอัจฉริยะ",

        # Income engine
        "incomeTitle": "เครื่องยนต์รายได้ NFT",
        "incomeDesc": "เลือกระดับ NFT เพื่อดูต้นทุนและผลตอบแทนที่รับประกัน",
        "nftSelectPrompt": "เลือกระดับ Flash",
        "nftCostLabel": "ต้นทุน",
        "nftReturnLabel": "ผลตอบแทนรวม",
        "nftNote": "ผลตอบแทนแสดงเป็น **4 เท่า** ของต้นทุนในทุกระดับ",

        # Burn
        "burnTitle": "กลไกการเผาโทเคน",
        "burnDesc": "ทุกปีจะมีการเผา **10%** ของอุปทานที่เหลืออยู่<br>กดปุ่มเพื่อจำลอง 10 ปีข้างหน้า",
        "simulateBurnBtn": "จำลองการเผา",
        "burnTableTitle": "ตารางการเผา",

        # Roadmap
        "roadmapTitle": "แผนงาน",
        "roadmapPhase1": "ระยะที่ 1: เปิดตัวโทเคนและ Airdrop",
        "roadmapPhase2": "ระยะที่ 2: เปิดขาย NFT ระดับ Flash",
        "roadmapPhase3": "ระยะที่ 3: จดทะเบียนบนตลาดแลกเปลี่ยน",
        "roadmapPhase4": "ระยะที่ 4: ขยายระบบนิเวศระดับโลก",

        # Footer
        "footerText": "© 2024 FlashMint สงวนลิขสิทธิ์",
        "disclaimer": "การลงทุนในสินทรัพย์ดิจิทัลมีความเสี่ยง โปรดศึกษาข้อมูลก่อนตัดสินใจ",
    },
    "en": {
        # Page title and navigation
        "appTitle": "FlashMint | The Future of Digital Income",
        "navHome": "Home",
        "navTokenomics": "Tokenomics",
        "navIncome": "Income Engine",
        "navBurn": "Burn Mechanism",
        "navRoadmap": "Roadmap",
        "langMenuLabel": "Language",

        # Hero
        "heroTitle": "FlashMint (FM)<br>The token that grows with its community",
        "heroSubtitle": "Hold a Flash NFT and receive **up to 4x** your cost, backed by a supply that shrinks every year.",
        "heroCta": "Get Started",

        # Tokenomics
        "tokenomicsTitle": "Tokenomics",
        "tokenomicsDesc": "A total supply of **1,000,000,000 FM**, allocated for a sustainable ecosystem.",
        "tokenomicsNote": "Every allocation is locked in the smart contract.",

        # Income engine
        "incomeTitle": "NFT Income Engine",
        "incomeDesc": "Pick an NFT level to see its cost and guaranteed return.",
        "nftSelectPrompt": "Choose a Flash level",
        "nftCostLabel": "Cost",
        "nftReturnLabel": "Total Return",
        "nftNote": "Every level returns **4x** its cost.",

        # Burn
        "burnTitle": "Token Burn Mechanism",
        "burnDesc": "Each year **10%** of the remaining supply is burned.<br>Press the button to simulate the next 10 years.",
        "simulateBurnBtn": "Simulate Burn",
        "burnTableTitle": "Burn Schedule",

        # Roadmap
        "roadmapTitle": "Roadmap",
        "roadmapPhase1": "Phase 1: Token launch and airdrop",
        "roadmapPhase2": "Phase 2: Flash NFT sale",
        "roadmapPhase3": "Phase 3: Exchange listings",
        "roadmapPhase4": "Phase 4: Global ecosystem expansion",

        # Footer
        "footerText": "© 2024 FlashMint. All rights reserved.",
        "disclaimer": "Digital assets carry risk. Do your own research before investing.",
    },
    "zh": {
        # Page title and navigation
        "appTitle": "FlashMint | 数字收入的未来",
        "navHome": "首页",
        "navTokenomics": "代币经济",
        "navIncome": "收入引擎",
        "navBurn": "销毁机制",
        "navRoadmap": "路线图",
        "langMenuLabel": "语言",

        # Hero
        "heroTitle": "FlashMint (FM)<br>与社区共同成长的代币",
        "heroSubtitle": "持有 Flash NFT，获得成本 **最高 4 倍** 的回报，供应量逐年递减。",
        "heroCta": "立即开始",

        # Tokenomics
        "tokenomicsTitle": "代币经济",
        "tokenomicsDesc": "总供应量 **1,000,000,000 FM**，为可持续的生态系统而分配。",
        "tokenomicsNote": "所有分配均锁定在智能合约中。",

        # Income engine
        "incomeTitle": "NFT 收入引擎",
        "incomeDesc": "选择 NFT 等级，查看成本与保证回报。",
        "nftSelectPrompt": "选择 Flash 等级",
        "nftCostLabel": "成本",
        "nftReturnLabel": "总回报",
        "nftNote": "每个等级的回报均为成本的 **4 倍**。",

        # Burn
        "burnTitle": "代币销毁机制",
        "burnDesc": "每年销毁剩余供应量的 **10%**。<br>点击按钮模拟未来 10 年。",
        "simulateBurnBtn": "模拟销毁",
        "burnTableTitle": "销毁时间表",

        # Roadmap
        "roadmapTitle": "路线图",
        "roadmapPhase1": "第一阶段：代币发行与空投",
        "roadmapPhase2": "第二阶段：Flash NFT 发售",
        "roadmapPhase3": "第三阶段：交易所上线",
        "roadmapPhase4": "第四阶段：全球生态扩展",

        # Footer
        "footerText": "© 2024 FlashMint 版权所有",
        "disclaimer": "数字资产存在风险，投资前请自行研究。",
    },
}

# Chart labels merged into LANG_DATA at startup when a bundle lacks them.
CHART_LABEL_DEFAULTS = {
    "th": {
        "distributionLabel1": "ชุมชน / Airdrop",
        "distributionLabel2": "สภาพคล่องเริ่มต้น",
        "distributionLabel3": "ทีมงาน / พัฒนา",
        "distributionLabel4": "ระบบนิเวศ",
        "burnYear0": "ปีที่ 0",
        "burnYear": "ปีที่",
        "burnLabel": "อุปทานคงเหลือ",
        "burnTooltipText": "อุปทาน",
        "burnedLabel": "เผาในปีนั้น",
    },
    "en": {
        "distributionLabel1": "Community / Airdrop",
        "distributionLabel2": "Initial Liquidity",
        "distributionLabel3": "Team / Development",
        "distributionLabel4": "Ecosystem",
        "burnYear0": "Year 0",
        "burnYear": "Year",
        "burnLabel": "Remaining Supply",
        "burnTooltipText": "Supply",
        "burnedLabel": "Burned That Year",
    },
    "zh": {
        "distributionLabel1": "社区 / 空投",
        "distributionLabel2": "初始流动性",
        "distributionLabel3": "团队 / 开发",
        "distributionLabel4": "生态系统",
        "burnYear0": "第 0 年",
        "burnYear": "第",
        "burnLabel": "剩余供应",
        "burnTooltipText": "供应",
        "burnedLabel": "当年销毁",
    },
}

_BOLD = re.compile(r"\*\*(.*?)\*\*")


def apply_chart_label_defaults(lang_data: dict, defaults: dict = CHART_LABEL_DEFAULTS) -> dict:
    """Fill missing or empty chart labels in place. Unknown languages are skipped."""
    for lang, labels in defaults.items():
        bundle = lang_data.get(lang)
        if bundle is None:
            continue
        for key, text in labels.items():
            if not bundle.get(key):
                bundle[key] = text
    return lang_data


def lookup(lang_data: dict, lang: str, key: str):
    """Return the translated text, or None when the language or key is missing.

    Callers ignore a None result and leave their target untouched.
    """
    text = lang_data.get(lang, {}).get(key)
    return text or None


def t(key: str, lang: str = "en", lang_data: dict = LANG_DATA) -> str:
    """Get translated text for a key, falling back to the key itself."""
    return lookup(lang_data, lang, key) or key


def is_rich_text(text: str) -> bool:
    return "**" in text or "<br>" in text


def to_rich_text(text: str) -> str:
    """Convert **bold** segments to <b> tags, keeping <br> line breaks."""
    return _BOLD.sub(r"<b>\1</b>", text)
