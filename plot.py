import sys
import pandas as pd
import matplotlib.pyplot as plt

csv_path = sys.argv[1] if len(sys.argv) > 1 else "schedule.csv"

# lê o CSV gerado pelo run.py
df = pd.read_csv(csv_path)
df = df.rename(columns=lambda s: s.strip())
df = df.reset_index().rename(columns={"index": "posicao"})

plt.figure(figsize=(10, max(4, 0.3 * len(df))))
ax = plt.gca()

# janela [earliest, latest] de cada aeronave, na ordem de pouso
for _, row in df.iterrows():
    ax.plot([row['earliest'], row['latest']], [row['posicao'], row['posicao']],
            color='#4A90E2', linewidth=2.0, alpha=0.5)

ax.scatter(df['target'], df['posicao'], s=30, color='#2B7CD3', marker='|', label='Alvo')

# pousos fora do alvo em vermelho
mask_desvio = df['deviation'] != 0
ax.scatter(df.loc[~mask_desvio, 'landing_time'], df.loc[~mask_desvio, 'posicao'],
           s=25, color='green', label='Pouso no alvo')
if mask_desvio.any():
    ax.scatter(df.loc[mask_desvio, 'landing_time'], df.loc[mask_desvio, 'posicao'],
               s=40, color='red', edgecolor='k', label='Pouso com desvio')

ax.set_yticks(df['posicao'])
ax.set_yticklabels(df['aircraft_id'])
ax.invert_yaxis()
ax.set_xlabel('Tempo')
ax.set_ylabel('Aeronave (ordem de pouso)')
ax.set_title(f"Escalonamento de pousos - custo {df['cost'].sum():.0f}")
ax.grid(True, linestyle='--', alpha=0.3)
ax.legend()

plt.tight_layout()
plt.savefig('schedule.png', dpi=150)
plt.show()
