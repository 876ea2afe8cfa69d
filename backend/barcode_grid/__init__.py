"""
条码网格文档生成 - 核心模块

模块结构：
- config/      运行期配置与格式规范加载
- models/      数据模型定义
- validation/  编码校验（前导零规则）
- render/      Code-128 条码渲染
- layout/      网格排版与分页
- doc_gen/     文档输出（Word/Excel/PDF）
- pipeline/    生成流水线与保存位置
- cli          命令行入口
"""

__version__ = "0.1.0"
