"""默认参数"""

# 区域切分：2x2 的叶子区域，骨干条带宽度 1，共 2x2 个区域 -> 6x6 网格
TILING_DEFAULT_AREA_HEIGHT = 2
TILING_DEFAULT_AREA_WIDTH = 2
TILING_DEFAULT_STRIPE_WIDTH = 1
TILING_DEFAULT_AREA_ROWS = 2
TILING_DEFAULT_AREA_COLS = 2

# 宿主机上每个节点的配置目录，以及节点内看到的路径
HOST_CONFIG_DIR_TEMPLATE = "files-{node_id}/usr/local/etc"
NODE_CONFIG_DIR = "/usr/local/etc"

PLAN_FILENAME = "plan.yaml"

# 守护进程启动时间：base + step * node_id（秒）
ZEBRA_START_BASE = 1.0
ZEBRA_START_STEP = 0.01
ROUTING_START_BASE = 5.0
OSPFD_START_STEP = 0.001
BGPD_START_STEP = 0.3
DEFAULT_START_STEP = 0.5

# 场景默认启用的协议
ENABLE_DEFAULT_OSPF = True
ENABLE_DEFAULT_OSPF6 = False
ENABLE_DEFAULT_BGP = False
ENABLE_DEFAULT_RIP = False
ENABLE_DEFAULT_RIPNG = False
