"""Built-in default dataset, used when no stored snapshot can be loaded."""
from rings.model import normalize_model
from rings.types import DataModel

DEFAULT_DATA = {
    "categories": [
        {"name": "计算机通识", "skills": {
            "comfortable": ["数据结构", "计算机网络", "HCI 研究方法"],
            "challenging": ["系统设计", "安全合规理解"],
            "near": ["分布式一致性"],
            "far": ["操作系统内核"],
        }},
        {"name": "技术栈", "skills": {
            "comfortable": ["Python", "C++ 基础", "Git"],
            "challenging": ["D3/SVG", "Linux 运维"],
            "near": ["K8s"],
            "far": ["内核态开发"],
        }},
        {"name": "前端", "skills": {
            "comfortable": ["React", "Tailwind", "TypeScript 基础"],
            "challenging": ["性能优化", "Web 安全"],
            "near": ["WebGL"],
            "far": ["浏览器内核原理"],
        }},
        {"name": "设计", "skills": {
            "comfortable": ["交互流程", "信息架构", "可用性评估"],
            "challenging": ["动效设计", "可视化编码"],
            "near": ["插画"],
            "far": ["3D 建模"],
        }},
        {"name": "沟通协作", "skills": {
            "comfortable": ["跨部门对齐", "需求澄清", "会议纪要"],
            "challenging": ["冲突化解", "利益相关人管理"],
            "near": ["公开演讲"],
            "far": ["大型路演"],
        }},
        {"name": "科研与写作", "skills": {
            "comfortable": ["英文写作", "审稿 rebuttal", "质性编码"],
            "challenging": ["实验设计", "量化统计"],
            "near": ["可重复实验工程化"],
            "far": ["大型纵向研究组织"],
        }},
        {"name": "产品", "skills": {
            "comfortable": ["PRD/里程碑", "竞品分析", "数据闭环"],
            "challenging": ["商业化策略", "增长实验"],
            "near": ["定价模型"],
            "far": ["生态平台化"],
        }},
        {"name": "运营", "skills": {
            "comfortable": ["使用分析", "工单回访", "指标看板"],
            "challenging": ["A/B 测试", "风控策略迭代"],
            "near": ["精细化分层运营"],
            "far": ["海量多租户运营"],
        }},
    ],
}


def default_model() -> DataModel:
    return normalize_model(DEFAULT_DATA)
