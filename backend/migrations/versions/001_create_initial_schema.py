"""Create organization, administrator, animal, adoption_request,
success_story and contact_request tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'organization',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.Text(), nullable=False),
        sa.Column('slug', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('telefono', sa.Text(), nullable=True),
        sa.Column('whatsapp', sa.Text(), nullable=True),
        sa.Column('direccion', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('instagram', sa.Text(), nullable=True),
        sa.Column('facebook', sa.Text(), nullable=True),
        sa.Column('donacion_alias', sa.Text(), nullable=True),
        sa.Column('donacion_cbu', sa.Text(), nullable=True),
        sa.Column('donacion_info', sa.Text(), nullable=True),
        sa.Column('activa', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('fecha_creacion', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug', name='uq_organization_slug'),
    )

    op.create_table(
        'administrator',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('organizacion_id', sa.Integer(), nullable=False),
        sa.Column('username', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('es_super_admin', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('fecha_creacion', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('ultimo_acceso', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['organizacion_id'], ['organization.id'], ondelete='RESTRICT'),
        sa.UniqueConstraint('username', name='uq_administrator_username'),
        sa.UniqueConstraint('email', name='uq_administrator_email'),
    )
    op.create_index('idx_administrator_org', 'administrator', ['organizacion_id'])

    op.create_table(
        'animal',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('organizacion_id', sa.Integer(), nullable=False),
        sa.Column('administrador_id', sa.Integer(), nullable=True),
        sa.Column('nombre', sa.Text(), nullable=False),
        sa.Column('especie', sa.String(32), nullable=False),
        sa.Column('sexo', sa.String(32), nullable=False),
        sa.Column('edad_aproximada', sa.Text(), nullable=False),
        sa.Column('tamanio', sa.String(32), nullable=False),
        sa.Column('raza_mezcla', sa.Text(), nullable=True),
        sa.Column('descripcion_historia', sa.Text(), nullable=False),
        sa.Column('estado_castracion', sa.Boolean(), nullable=False),
        sa.Column('estado_vacunacion', sa.Text(), nullable=False),
        sa.Column('estado_desparasitacion', sa.Boolean(), nullable=False),
        sa.Column('socializa_perros', sa.Boolean(), nullable=True),
        sa.Column('socializa_gatos', sa.Boolean(), nullable=True),
        sa.Column('socializa_ninos', sa.Boolean(), nullable=True),
        sa.Column('necesidades_especiales', sa.Text(), nullable=True),
        sa.Column('tipo_hogar_ideal', sa.Text(), nullable=True),
        sa.Column('estado', sa.String(32), server_default='Disponible', nullable=False),
        sa.Column('publicado_por', sa.Text(), nullable=True),
        sa.Column('contacto_rescatista', sa.Text(), nullable=True),
        sa.Column('foto_principal', sa.Text(), nullable=False),
        sa.Column('foto_2', sa.Text(), nullable=True),
        sa.Column('foto_3', sa.Text(), nullable=True),
        sa.Column('foto_4', sa.Text(), nullable=True),
        sa.Column('foto_5', sa.Text(), nullable=True),
        sa.Column('fecha_publicacion', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['organizacion_id'], ['organization.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['administrador_id'], ['administrator.id'], ondelete='SET NULL'),
        sa.CheckConstraint("especie IN ('Perro', 'Gato')", name='ck_animal_especie'),
        sa.CheckConstraint("sexo IN ('Macho', 'Hembra')", name='ck_animal_sexo'),
        sa.CheckConstraint("tamanio IN ('Pequeño', 'Mediano', 'Grande')", name='ck_animal_tamanio'),
        sa.CheckConstraint(
            "estado IN ('Disponible', 'En proceso', 'En transito', 'Adoptado')",
            name='ck_animal_estado'
        ),
    )
    op.create_index('idx_animal_org_estado', 'animal', ['organizacion_id', 'estado'])
    op.create_index('idx_animal_fecha_publicacion', 'animal', [sa.text('fecha_publicacion DESC')])

    op.create_table(
        'adoption_request',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('animal_id', sa.Integer(), nullable=False),
        sa.Column('nombre_completo', sa.Text(), nullable=False),
        sa.Column('edad', sa.Integer(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('telefono_whatsapp', sa.Text(), nullable=False),
        sa.Column('instagram', sa.Text(), nullable=True),
        sa.Column('ciudad_zona', sa.Text(), nullable=False),
        sa.Column('tipo_vivienda', sa.String(32), nullable=False),
        sa.Column('vive_solo_acompanado', sa.Text(), nullable=False),
        sa.Column('todos_de_acuerdo', sa.Boolean(), nullable=False),
        sa.Column('tiene_otros_animales', sa.Boolean(), nullable=False),
        sa.Column('otros_animales_castrados', sa.String(32), nullable=True),
        sa.Column('experiencia_previa', sa.Text(), nullable=False),
        sa.Column('puede_cubrir_gastos', sa.Boolean(), nullable=False),
        sa.Column('veterinaria_que_usa', sa.Text(), nullable=True),
        sa.Column('motivacion', sa.Text(), nullable=False),
        sa.Column('compromiso_castracion', sa.Boolean(), nullable=False),
        sa.Column('acepta_contacto', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('fecha_solicitud', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('estado_solicitud', sa.String(32), server_default='Nueva', nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['animal_id'], ['animal.id'], ondelete='RESTRICT'),
        sa.CheckConstraint(
            "tipo_vivienda IN ('Casa con patio', 'Casa sin patio', 'Departamento', 'Otro')",
            name='ck_request_tipo_vivienda'
        ),
        sa.CheckConstraint(
            "otros_animales_castrados IN ('Sí', 'No', 'Algunos')",
            name='ck_request_otros_castrados'
        ),
        sa.CheckConstraint(
            "estado_solicitud IN ('Nueva', 'Revisada', 'En evaluación', 'Aprobada', 'Rechazada')",
            name='ck_request_estado'
        ),
    )
    op.create_index('idx_request_animal', 'adoption_request', ['animal_id'])
    op.create_index('idx_request_fecha', 'adoption_request', [sa.text('fecha_solicitud DESC')])

    op.create_table(
        'success_story',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('animal_id', sa.Integer(), nullable=False),
        sa.Column('organizacion_id', sa.Integer(), nullable=False),
        sa.Column('titulo', sa.Text(), nullable=False),
        sa.Column('historia', sa.Text(), nullable=False),
        sa.Column('foto_actual_1', sa.Text(), nullable=True),
        sa.Column('foto_actual_2', sa.Text(), nullable=True),
        sa.Column('foto_actual_3', sa.Text(), nullable=True),
        sa.Column('fecha_adopcion', sa.Date(), nullable=False),
        sa.Column('fecha_publicacion', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['animal_id'], ['animal.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['organizacion_id'], ['organization.id'], ondelete='RESTRICT'),
        sa.UniqueConstraint('animal_id', name='uq_success_story_animal'),
    )
    op.create_index('idx_success_story_org', 'success_story', ['organizacion_id'])

    op.create_table(
        'contact_request',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre_refugio', sa.Text(), nullable=False),
        sa.Column('nombre_contacto', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('telefono', sa.Text(), nullable=False),
        sa.Column('ciudad', sa.Text(), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=False),
        sa.Column('instagram', sa.Text(), nullable=True),
        sa.Column('facebook', sa.Text(), nullable=True),
        sa.Column('cantidad_animales', sa.Text(), nullable=True),
        sa.Column('estado', sa.String(32), server_default='Pendiente', nullable=False),
        sa.Column('notas_admin', sa.Text(), nullable=True),
        sa.Column('fecha_solicitud', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('fecha_respuesta', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "estado IN ('Pendiente', 'Aprobada', 'Rechazada')",
            name='ck_contact_estado'
        ),
    )
    op.create_index('idx_contact_request_estado', 'contact_request', ['estado'])


def downgrade():
    op.drop_table('contact_request')
    op.drop_table('success_story')
    op.drop_table('adoption_request')
    op.drop_table('animal')
    op.drop_table('administrator')
    op.drop_table('organization')
